from .scoring_gateway import IScoringGateway

__all__ = ["IScoringGateway"]
