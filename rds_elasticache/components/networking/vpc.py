"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC (10.0.0.0/16): Defines the isolated network container.
2. Internet Gateway (IGW): the "door" to the internet for the public tier.
3. Subnets (one of each tier per availability zone, all /24):
   - Public (10.0.0.0/24, 10.0.1.0/24): Webserver EC2 and the NAT gateway.
   - Private (10.0.2.0/24, 10.0.3.0/24): RDS MySQL and ElastiCache Redis.
4. NAT Gateway: exactly one, with an Elastic IP, in the first public subnet.
   Private subnets in every AZ egress through it.
5. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW.
   - Private RT: 0.0.0.0/0 -> NAT. No inbound path from the internet.
6. Associations: Explicitly linking subnets to route tables.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_elasticache.configs.constants import VPC_CIDR, SUBNET_CIDRS, AVAILABILITY_ZONES
from rds_elasticache.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    private_subnet_ids: list[pulumi.Output[str]]
    nat_gateway_id: pulumi.Output[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with a public and a NAT-routed private subnet tier.

    A single NAT gateway keeps costs down for this non-production stack.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("rds-elasticache:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=VPC_CIDR,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets = [
            aws.ec2.Subnet(
                f"{name}-public-subnet-{index}",
                vpc_id=self.vpc.id,
                cidr_block=cidr,
                availability_zone=az,
                map_public_ip_on_launch=True,
                tags=create_tags(environment, f"{name}-public-subnet-{index}", tier="public"),
                opts=child_opts,
            )
            for index, (cidr, az) in enumerate(zip(SUBNET_CIDRS["public"], AVAILABILITY_ZONES))
        ]

        self.private_subnets = [
            aws.ec2.Subnet(
                f"{name}-private-subnet-{index}",
                vpc_id=self.vpc.id,
                cidr_block=cidr,
                availability_zone=az,
                tags=create_tags(environment, f"{name}-private-subnet-{index}", tier="private"),
                opts=child_opts,
            )
            for index, (cidr, az) in enumerate(zip(SUBNET_CIDRS["private"], AVAILABILITY_ZONES))
        ]

        # Single NAT gateway shared by all private subnets
        self.nat_eip = aws.ec2.Eip(
            f"{name}-nat-eip",
            domain="vpc",
            tags=create_tags(environment, f"{name}-nat-eip"),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.igw]),
        )

        self.nat_gateway = aws.ec2.NatGateway(
            f"{name}-nat",
            allocation_id=self.nat_eip.id,
            subnet_id=self.public_subnets[0].id,
            tags=create_tags(environment, f"{name}-nat"),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.igw]),
        )

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "public_subnet_ids": [subnet.id for subnet in self.public_subnets],
            "private_subnet_ids": [subnet.id for subnet in self.private_subnets],
            "nat_gateway_id": self.nat_gateway.id,
        })

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and private subnets."""
        self.public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )

        self.private_rt = aws.ec2.RouteTable(
            f"{name}-private-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    nat_gateway_id=self.nat_gateway.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-private-rt"),
            opts=opts,
        )

        self.public_rt_associations = [
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=self.public_rt.id,
                opts=opts,
            )
            for index, subnet in enumerate(self.public_subnets)
        ]

        self.private_rt_associations = [
            aws.ec2.RouteTableAssociation(
                f"{name}-private-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=self.private_rt.id,
                opts=opts,
            )
            for index, subnet in enumerate(self.private_subnets)
        ]

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            public_subnet_ids=[subnet.id for subnet in self.public_subnets],
            private_subnet_ids=[subnet.id for subnet in self.private_subnets],
            nat_gateway_id=self.nat_gateway.id,
        )
