from .scoring_gateway import ScoringGateway

__all__ = ["ScoringGateway"]
