"""Pulumi mocks used by the infrastructure tests."""

import pulumi

MOCK_AMI_ID = "ami-0123456789abcdef0"
MOCK_PUBLIC_IP = "203.0.113.10"
MOCK_PUBLIC_DNS = "ec2-203-0-113-10.compute-1.amazonaws.com"
MOCK_SECRET_ARN = (
    "arn:aws:secretsmanager:us-east-1:123456789012:secret:rds!db-8f2c1d4e-AbC123"
)


class TopologyMocks(pulumi.runtime.Mocks):
    """
    Pulumi mocks that echo inputs back as state and record every resource.

    Provider-computed attributes the stack reads back (endpoints, public
    addresses, generated names) are filled in per resource type.
    """

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)

        if args.typ in (
            "aws:iam/role:Role",
            "aws:iam/instanceProfile:InstanceProfile",
            "aws:rds/subnetGroup:SubnetGroup",
        ):
            outputs.setdefault("name", args.name)
            outputs.setdefault("arn", f"arn:aws:iam::123456789012:{args.name}")
        elif args.typ == "aws:rds/instance:Instance":
            address = f"{args.inputs['identifier']}.abcdefgh.us-east-1.rds.amazonaws.com"
            outputs.update({
                "address": address,
                "endpoint": f"{address}:3306",
                "masterUserSecrets": [{
                    "secretArn": MOCK_SECRET_ARN,
                    "secretStatus": "active",
                    "kmsKeyId": "",
                }],
            })
        elif args.typ == "aws:elasticache/cluster:Cluster":
            outputs["cacheNodes"] = [{
                "id": "0001",
                "address": f"{args.inputs['clusterId']}.abc123.0001.use1.cache.amazonaws.com",
                "port": 6379,
                "availabilityZone": "us-east-1a",
            }]
        elif args.typ == "aws:ec2/instance:Instance":
            outputs.update({
                "publicIp": MOCK_PUBLIC_IP,
                "publicDns": MOCK_PUBLIC_DNS,
            })

        return [f"{args.name}-id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:ec2/getAmi:getAmi":
            return {"id": MOCK_AMI_ID, "architecture": "x86_64"}
        return {}

    def find(self, typ: str, prefix: str = "") -> list[pulumi.runtime.MockResourceArgs]:
        """Recorded resources of a type whose name starts with prefix."""
        return [r for r in self.resources if r.typ == typ and r.name.startswith(prefix)]


MOCKS = TopologyMocks()
