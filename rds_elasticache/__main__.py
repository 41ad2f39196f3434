"""
Pulumi program entry point for the RDS + ElastiCache stack.

Loads and validates the stack configuration, declares every component
resource and exports the output values:
- secret_name: Secrets Manager secret holding the MySQL master credentials
- mysql_endpoint: RDS MySQL address
- redis_endpoint: ElastiCache Redis address
- webserver_public_ip: Webserver public IP
- webserver_public_url: http://<public-dns>:<app_port>
"""

import pulumi

from rds_elasticache.configs.environment import get_config
from rds_elasticache.stack import declare_stack


def main() -> None:
    """Deploy the RDS + ElastiCache web stack."""
    config = get_config()
    resources = declare_stack(config)

    for key, value in resources.outputs.items():
        pulumi.export(key, value)


# Execute
main()
