"""
Pulumi component resources for the RDS + ElastiCache stack.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, NAT gateway, security groups
- compute: EC2 webserver
- storage: RDS MySQL, ElastiCache Redis
- security: IAM role and instance profile
"""
