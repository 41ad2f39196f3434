"""
Pulumi infrastructure-as-code for the RDS + ElastiCache web stack.

This package defines AWS infrastructure including:
- VPC with public subnets and NAT-routed private subnets
- Security groups for the webserver, MySQL and Redis tiers
- RDS MySQL for persistence
- ElastiCache Redis for caching
- IAM role and instance profile for the webserver
- EC2 webserver bootstrapped from a user data script
"""
