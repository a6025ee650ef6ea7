"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: MIT-0

Permission is hereby granted, free of charge, to any person obtaining a copy of this
software and associated documentation files (the "Software"), to deal in the Software
without restriction, including without limitation the rights to use, copy, modify,
merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
permit persons to whom the Software is furnished to do so.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""

from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    aws_ec2 as ec2,
    aws_iam as iam,
    aws_rds as rds,
    CfnOutput as cfo,
)
from constructs import Construct


class UniviewStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        res_name: str,
        instance: str,
        config: dict,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Network
        self.vpc = self.create_vpc(res_name, config)

        # Security group for the server
        self.instance_security_group = self.create_security_groups(
            res_name, instance, config, self.vpc
        )

        # Instance role
        instance_role = self.create_instance_role(res_name, instance, config)

        # Server
        self.instance = self.create_instance(
            res_name, config, self.vpc, self.instance_security_group, instance_role
        )

        # Elastic IP
        self.eip = self.create_elastic_ip(self.instance)

        # Database restored from snapshot
        self.db_instance = self.create_db_instance(res_name, config, self.vpc)

        # Only the server may reach the database
        self.allow_db_access(
            self.db_instance, self.instance, int(config["rds"]["port"])
        )

        self.create_outputs(self.db_instance)

    def create_vpc(self, res_name, config):
        vpc_config = config["vpc"]

        vpc = ec2.Vpc(
            self,
            f"{res_name}-vpc",
            ip_addresses=ec2.IpAddresses.cidr(vpc_config["cidr_range"]),
            nat_gateways=int(vpc_config.get("nat_gateways", 0)),
            max_azs=int(vpc_config.get("max_azs", 3)),
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="public-subnet-1",
                    subnet_type=ec2.SubnetType.PUBLIC,
                    cidr_mask=int(vpc_config.get("public_cidr_mask", 24)),
                ),
                ec2.SubnetConfiguration(
                    name="isolated-subnet-1",
                    subnet_type=ec2.SubnetType.PRIVATE_ISOLATED,
                    cidr_mask=int(vpc_config.get("isolated_cidr_mask", 28)),
                ),
            ],
        )

        return vpc

    # Function to create security groups
    def create_security_groups(self, res_name, instance, config, vpc):
        instance_security_group = ec2.SecurityGroup(
            self,
            f"{res_name}-instance-sg",
            description=f"SecurityGroup for {res_name} - {instance}",
            vpc=vpc,
            allow_all_outbound=True,
        )

        for rule in config["ec2"]["ingress"]:
            instance_security_group.add_ingress_rule(
                ec2.Peer.any_ipv4(),
                ec2.Port.tcp(int(rule["port"])),
                rule.get("description", f"allow TCP connection on PORT {rule['port']}"),
            )

        return instance_security_group

    def create_instance_role(self, res_name, instance, config):
        instance_role = iam.Role(
            self,
            f"{res_name}InstanceRole{instance}",
            assumed_by=iam.ServicePrincipal("ec2.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(policy_name)
                for policy_name in config["ec2"].get(
                    "managed_policies", ["AmazonSSMManagedInstanceCore"]
                )
            ],
        )

        return instance_role

    def create_instance(self, res_name, config, vpc, security_group, role):
        ec2_config = config["ec2"]

        # Root volume, size in GiB
        root_volume = ec2.BlockDevice(
            device_name=ec2_config.get("root_device_name", "/dev/xvda"),
            volume=ec2.BlockDeviceVolume.ebs(int(ec2_config["root_volume_size"])),
        )

        server = ec2.Instance(
            self,
            f"{res_name}-instance",
            vpc=vpc,
            vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PUBLIC),
            security_group=security_group,
            instance_type=ec2.InstanceType.of(
                getattr(ec2.InstanceClass, ec2_config["ec2_type"]),
                getattr(ec2.InstanceSize, ec2_config["ec2_size"]),
            ),
            machine_image=ec2.GenericLinuxImage(ec2_config["ami_map"]),
            block_devices=[root_volume],
            role=role,
        )

        return server

    def create_elastic_ip(self, server):
        eip = ec2.CfnEIP(self, "server-ip", domain="vpc")

        ec2.CfnEIPAssociation(
            self,
            "Ec2Association",
            allocation_id=eip.attr_allocation_id,
            instance_id=server.instance_id,
        )

        return eip

    def create_db_instance(self, res_name, config, vpc):
        rds_config = config["rds"]

        db_instance = rds.DatabaseInstanceFromSnapshot(
            self,
            f"{res_name}-db-instance",
            engine=rds.DatabaseInstanceEngine.postgres(
                version=getattr(
                    rds.PostgresEngineVersion, rds_config["postgres_version"]
                ),
            ),
            snapshot_identifier=rds_config["snapshot_identifier"],
            vpc=vpc,
            vpc_subnets=ec2.SubnetSelection(
                subnet_type=ec2.SubnetType.PRIVATE_ISOLATED
            ),
            instance_type=ec2.InstanceType.of(
                getattr(ec2.InstanceClass, rds_config["db_type"]),
                getattr(ec2.InstanceSize, rds_config["db_size"]),
            ),
            port=int(rds_config["port"]),
            allow_major_version_upgrade=rds_config["allow_major_version_upgrade"],
            auto_minor_version_upgrade=rds_config["auto_minor_version_upgrade"],
            delete_automated_backups=rds_config["delete_automated_backups"],
            publicly_accessible=False,
            deletion_protection=rds_config["deletion_protection"],
            removal_policy=getattr(RemovalPolicy, rds_config["removal_policy"]),
            backup_retention=Duration.days(int(rds_config["backup_retention_days"])),
            allocated_storage=int(rds_config["allocated_storage"]),
            multi_az=rds_config["multi_az"],
            credentials=rds.SnapshotCredentials.from_generated_secret(
                rds_config.get("username", "postgres")
            ),
        )

        return db_instance

    def allow_db_access(self, db_instance, server, port):
        db_instance.connections.allow_from(
            server,
            ec2.Port.tcp(port),
            f"allow TCP connection on PORT {port} from the server",
        )

    def create_outputs(self, db_instance):
        cfo(
            self,
            "dbEndpoint",
            value=db_instance.instance_endpoint.hostname,
            description="Hostname of the database instance",
        )

        cfo(
            self,
            "secretName",
            value=db_instance.secret.secret_name,
            description="Secrets Manager secret holding the generated database credentials",
        )
