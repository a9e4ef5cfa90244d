"""
Domain layer - entities, ports and pure services.

Has no dependency on frameworks or on the outer layers.
"""
