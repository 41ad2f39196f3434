"""
Detailed tests for individual IAC components.

Validates:
1. Each component class has required attributes
2. Components are properly organized in packages
3. Output dataclasses have required fields
"""

from dataclasses import is_dataclass


def _fields(outputs_cls) -> set[str]:
    return {f.name for f in outputs_cls.__dataclass_fields__.values()}


class TestNetworkingComponents:
    """Tests for networking infrastructure components."""

    def test_vpc_component_attributes(self):
        """VpcComponent should have essential attributes."""
        from rds_elasticache.components.networking.vpc import VpcComponent

        assert hasattr(VpcComponent, "get_outputs")
        assert hasattr(VpcComponent, "_create_route_tables")

    def test_vpc_outputs_fields(self):
        """VpcOutputs should expose both subnet tiers and the NAT gateway."""
        from rds_elasticache.components.networking.vpc import VpcOutputs

        assert is_dataclass(VpcOutputs)
        assert _fields(VpcOutputs) == {
            "vpc_id",
            "public_subnet_ids",
            "private_subnet_ids",
            "nat_gateway_id",
        }

    def test_security_group_outputs_fields(self):
        """SecurityGroupOutputs should include one id per tier."""
        from rds_elasticache.components.networking.security_groups import SecurityGroupOutputs

        assert is_dataclass(SecurityGroupOutputs)
        assert _fields(SecurityGroupOutputs) == {"webserver_sg_id", "database_sg_id", "redis_sg_id"}


class TestSecurityComponents:
    """Tests for security infrastructure components."""

    def test_iam_role_outputs_fields(self):
        """IamRoleOutputs should include the role ARN and instance profile."""
        from rds_elasticache.components.security.iam_roles import IamRoleOutputs

        assert is_dataclass(IamRoleOutputs)
        assert {"webserver_role_arn", "webserver_instance_profile_name"}.issubset(_fields(IamRoleOutputs))

    def test_secret_read_policy_document(self):
        """Inline policy should only grant GetSecretValue on secrets."""
        from rds_elasticache.components.security.iam_roles import secret_read_policy_document

        document = secret_read_policy_document()
        statements = document["Statement"]

        assert document["Version"] == "2012-10-17"
        assert len(statements) == 1
        assert statements[0]["Effect"] == "Allow"
        assert statements[0]["Action"] == ["secretsmanager:GetSecretValue"]
        assert "secretsmanager:ListSecrets" not in statements[0]["Action"]
        assert all(r.startswith("arn:aws:secretsmanager:") for r in statements[0]["Resource"])

    def test_secret_read_policy_document_is_a_copy(self):
        """Mutating a returned document should not leak into the next one."""
        from rds_elasticache.components.security.iam_roles import secret_read_policy_document

        secret_read_policy_document()["Statement"][0]["Action"].append("secretsmanager:ListSecrets")

        assert secret_read_policy_document()["Statement"][0]["Action"] == ["secretsmanager:GetSecretValue"]


class TestStorageComponents:
    """Tests for storage infrastructure components."""

    def test_rds_outputs_fields(self):
        """RdsOutputs should include the endpoint address and secret name."""
        from rds_elasticache.components.storage.rds_mysql import RdsOutputs

        assert is_dataclass(RdsOutputs)
        assert {"address", "port", "database_name", "secret_name"}.issubset(_fields(RdsOutputs))

    def test_redis_outputs_fields(self):
        """RedisOutputs should include the endpoint address."""
        from rds_elasticache.components.storage.elasticache_redis import RedisOutputs

        assert is_dataclass(RedisOutputs)
        assert {"cluster_id", "address", "port"}.issubset(_fields(RedisOutputs))


class TestComputeComponents:
    """Tests for compute infrastructure components."""

    def test_webserver_outputs_fields(self):
        """WebserverOutputs should include public address and URL."""
        from rds_elasticache.components.compute.webserver import WebserverOutputs

        assert is_dataclass(WebserverOutputs)
        assert {"instance_id", "public_ip", "public_dns", "public_url"}.issubset(_fields(WebserverOutputs))


class TestComponentPackageStructure:
    """Tests for component package organization."""

    def test_all_component_packages_have_init(self, package_root):
        """All component packages should have __init__.py."""
        for name in ["networking", "security", "storage", "compute"]:
            init_file = package_root / "components" / name / "__init__.py"
            assert init_file.exists(), f"Missing __init__.py in {name}"

    def test_config_packages_have_init(self, package_root):
        """Config and utils packages should have __init__.py."""
        for pkg_dir in [package_root / "configs", package_root / "utils", package_root / "components"]:
            assert (pkg_dir / "__init__.py").exists(), f"Missing __init__.py in {pkg_dir.name}"
