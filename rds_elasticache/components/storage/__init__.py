"""
Storage components for RDS and ElastiCache.

Components:
- RdsMysqlComponent: RDS MySQL database
- ElastiCacheRedisComponent: Single-node ElastiCache Redis cluster
"""

from rds_elasticache.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs
from rds_elasticache.components.storage.elasticache_redis import ElastiCacheRedisComponent, RedisOutputs

__all__ = [
    "RdsMysqlComponent",
    "RdsOutputs",
    "ElastiCacheRedisComponent",
    "RedisOutputs",
]
