"""
Compute components for EC2.

Components:
- WebserverComponent: Public EC2 instance for the web application
"""

from rds_elasticache.components.compute.webserver import WebserverComponent, WebserverOutputs

__all__ = [
    "WebserverComponent",
    "WebserverOutputs",
]
