"""Infrastructural patterns related to networking.

Components in this module refer to one another only through the narrow protocols defined here, so any object which
provides the right attributes can stand in for a component, such as an existing ``aws.kms.Key`` used as an
``EncryptionKeyReference``.
"""

import netkit
import netkit.iam
import pulumi
import pulumi_aws as aws

from collections.abc import Iterable
from netkit.constants import (
    FLOW_LOG_CLOUDWATCH_ACTIONS,
    FLOW_LOG_DEFAULT_RETENTION_DAYS,
    FLOW_LOG_DESTINATION_CLOUDWATCH,
    FLOW_LOG_DESTINATION_S3,
    FLOW_LOG_DESTINATIONS,
    FLOW_LOG_MAX_AGGREGATION_INTERVALS,
    FLOW_LOG_SERVICE_PRINCIPAL,
    FLOW_LOG_TRAFFIC_TYPES,
    INSTANCE_TENANCIES,
)
from netkit.exceptions import InvalidArgumentError, PreconditionViolationError
from typing import Protocol


class VpcReference(Protocol):
    vpc_id: pulumi.Output[str]
    internet_gateway_id: pulumi.Output[str] | None


class RouteTableReference(Protocol):
    route_table_id: pulumi.Output[str]
    vpc: VpcReference


class SubnetReference(Protocol):
    subnet_id: pulumi.Output[str]
    subnet_name: str
    availability_zone: str


class NatGatewayReference(Protocol):
    nat_gateway_id: pulumi.Output[str]
    nat_gateway_name: str


class SecurityGroupReference(Protocol):
    security_group_id: pulumi.Output[str]


class EncryptionKeyReference(Protocol):
    arn: pulumi.Output[str]


class Vpc(netkit.NetkitComponentResource):
    """**Pulumi Type:** ``netkit:network:Vpc``

    Builds a VPC, optionally with an Internet Gateway attached to it. Gateway endpoints and flow logs are added
    afterward with :py:meth:`add_gateway_endpoint` and :py:meth:`add_flow_logs`.

    Produces the following ``resources``:

        - *flow_logs* - Dict of `aws.ec2.FlowLogs <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/flowlog/>`_
          keyed by destination type, filled in by :py:meth:`add_flow_logs`.
        - *flow_logs_group* - If flow logs are delivered to CloudWatch, the `aws.cloudwatch.LogGroup
          <https://www.pulumi.com/registry/packages/aws/api-docs/cloudwatch/loggroup/>`_ receiving them.
        - *flow_logs_role* - If flow logs are delivered to CloudWatch, the :py:class:`netkit.iam.ServiceRole` the flow
          logs service delivers through.
        - *gateway_endpoints* - Dict of `aws.ec2.VpcEndpoints
          <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/vpcendpoint/>`_ with a ``vpc_endpoint_type`` of
          ``Gateway``, keyed by name.
        - *internet_gateway* - If ``internet_gateway`` is ``True``, this is the `aws.ec2.InternetGateway
          <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/internetgateway/>`_.
        - *internet_gateway_attachment* - If ``internet_gateway`` is ``True``, this is the
          `aws.ec2.InternetGatewayAttachment
          <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/internetgatewayattachment/>`_ binding it to the VPC.
        - *vpc* - The `aws.ec2.Vpc <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/vpc/>`_.

    :param name: A string identifying this set of resources. Also used as the VPC's ``Name`` tag.
    :type name: str

    :param project: The NetkitProject to add these resources to.
    :type project: netkit.NetkitProject

    :param cidr_block: A CIDR describing the IP space of this VPC.
    :type cidr_block: str

    :param enable_dns_hostnames: When True, instances launched in the VPC get public DNS hostnames. Defaults to None.
    :type enable_dns_hostnames: bool, optional

    :param enable_dns_support: When True, the Amazon-provided DNS server resolves names in the VPC. Defaults to None.
    :type enable_dns_support: bool, optional

    :param instance_tenancy: Either ``default`` or ``dedicated``. Defaults to None.
    :type instance_tenancy: str, optional

    :param internet_gateway: Build an Internet Gateway and attach it to the VPC. Defaults to False.
    :type internet_gateway: bool, optional

    :param opts: Additional pulumi.ResourceOptions to apply to these resources. Defaults to None.
    :type opts: pulumi.ResourceOptions, optional

    :param kwargs: Any other keyword arguments which will be passed as inputs to the NetkitComponentResource
        superconstructor.

    :raises InvalidArgumentError: Thrown if ``instance_tenancy`` is not a recognized value.
    """

    def __init__(
        self,
        name: str,
        project: netkit.NetkitProject,
        cidr_block: str,
        enable_dns_hostnames: bool = None,
        enable_dns_support: bool = None,
        instance_tenancy: str = None,
        internet_gateway: bool = False,
        opts: pulumi.ResourceOptions = None,
        **kwargs,
    ):
        if instance_tenancy is not None and instance_tenancy not in INSTANCE_TENANCIES:
            raise InvalidArgumentError(
                f'Invalid instance_tenancy ({instance_tenancy}) - must be one of {", ".join(INSTANCE_TENANCIES)}'
            )

        super().__init__('netkit:network:Vpc', name, project, opts=opts, **kwargs)

        self.__cidr_block = cidr_block

        vpc = aws.ec2.Vpc(
            f'{name}-vpc',
            cidr_block=cidr_block,
            enable_dns_hostnames=enable_dns_hostnames,
            enable_dns_support=enable_dns_support,
            instance_tenancy=instance_tenancy,
            tags=self.tags_with_name(name),
            opts=pulumi.ResourceOptions(parent=self),
        )

        # Allow traffic in from the internet
        ig = None
        ig_attachment = None
        if internet_gateway:
            pulumi.debug(f'Building an Internet Gateway for VPC {name}')
            ig = aws.ec2.InternetGateway(
                f'{name}-ig',
                tags=self.tags_with_name(name),
                opts=pulumi.ResourceOptions(parent=self),
            )
            ig_attachment = aws.ec2.InternetGatewayAttachment(
                f'{name}-igattach',
                internet_gateway_id=ig.id,
                vpc_id=vpc.id,
                opts=pulumi.ResourceOptions(parent=self, depends_on=[vpc, ig]),
            )

        self.finish(
            resources={
                'flow_logs': {},
                'flow_logs_group': None,
                'flow_logs_role': None,
                'gateway_endpoints': {},
                'internet_gateway': ig,
                'internet_gateway_attachment': ig_attachment,
                'vpc': vpc,
            },
        )

    @property
    def vpc_id(self) -> pulumi.Output[str]:
        return self.resources['vpc'].id

    @property
    def cidr_block(self) -> str:
        return self.__cidr_block

    @property
    def internet_gateway_id(self) -> pulumi.Output[str] | None:
        """ID of the Internet Gateway, or ``None`` if this VPC was built without one."""

        ig = self.resources['internet_gateway']
        return ig.id if ig is not None else None

    def add_gateway_endpoint(self, name: str, service: str, route_table_ids: list) -> aws.ec2.VpcEndpoint:
        """Builds a gateway endpoint to an AWS service and associates it with the given route tables.

        :param name: A string identifying the endpoint within this VPC.
        :type name: str

        :param service: The service portion of the endpoint's service name, such as ``s3`` or ``dynamodb``. Do not use
            the fully qualified name; ``com.amazonaws.us-east-1.s3`` is formed for you.
        :type service: str

        :param route_table_ids: IDs of the route tables which should route to the service through this endpoint.
        :type route_table_ids: list[str]

        :return: The endpoint.
        :rtype: aws.ec2.VpcEndpoint

        :raises PreconditionViolationError: Thrown if this VPC already has a gateway endpoint with the same name.
        """

        if name in self.resources['gateway_endpoints']:
            raise PreconditionViolationError(f'A gateway endpoint named {name} already exists on {self.name}')

        endpoint = aws.ec2.VpcEndpoint(
            f'{self.name}-gateway-{name}',
            route_table_ids=route_table_ids,
            service_name=f'com.amazonaws.{self.project.aws_region}.{service}',
            vpc_endpoint_type='Gateway',
            vpc_id=self.vpc_id,
            tags=self.tags_with_name(f'{self.name}-{name}'),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.resources['vpc']]),
        )
        self.resources['gateway_endpoints'][name] = endpoint

        return endpoint

    def add_flow_logs(
        self,
        destinations: Iterable[str],
        traffic_type: str,
        max_aggregation_interval: int,
        log_format: str = None,
        encryption_key: EncryptionKeyReference = None,
        bucket_arn: str = None,
        log_retention_in_days: int = FLOW_LOG_DEFAULT_RETENTION_DAYS,
    ) -> dict[str, aws.ec2.FlowLog]:
        """Delivers traffic flow logs for this VPC to CloudWatch Logs, S3, or both. Each destination gets its own
        independent flow log. A destination can only be configured once per VPC.

        When logging to CloudWatch, this builds a log group encrypted with ``encryption_key`` and a role the flow logs
        service can assume, allowed to write only to that log group.

        :param destinations: Any of ``cloud-watch-logs`` and ``s3``.
        :type destinations: Iterable[str]

        :param traffic_type: Which traffic to log: ``ALL``, ``ACCEPT``, or ``REJECT``.
        :type traffic_type: str

        :param max_aggregation_interval: Seconds over which flows are aggregated into a record. Must be 60 or 600.
        :type max_aggregation_interval: int

        :param log_format: A custom flow log record format. Defaults to None, the AWS default format.
        :type log_format: str, optional

        :param encryption_key: KMS key to encrypt the log group with. Required for ``cloud-watch-logs``. Only its
            ``arn`` is used. Defaults to None.
        :type encryption_key: EncryptionKeyReference, optional

        :param bucket_arn: ARN of the bucket to deliver to. Required for ``s3``. Defaults to None.
        :type bucket_arn: str, optional

        :param log_retention_in_days: How long CloudWatch keeps flow log records. Defaults to 731.
        :type log_retention_in_days: int, optional

        :return: The flow logs built by this call, keyed by destination.
        :rtype: dict[str, aws.ec2.FlowLog]

        :raises InvalidArgumentError: Thrown if any setting is invalid, or a destination's required setting is missing.
        :raises PreconditionViolationError: Thrown if one of the destinations already has flow logs on this VPC.
        """

        destinations = list(destinations)

        # Validate everything before declaring anything
        if max_aggregation_interval not in FLOW_LOG_MAX_AGGREGATION_INTERVALS:
            raise InvalidArgumentError(
                f'Invalid max_aggregation_interval ({max_aggregation_interval}) - must be 60 or 600 seconds'
            )
        if traffic_type not in FLOW_LOG_TRAFFIC_TYPES:
            raise InvalidArgumentError(
                f'Invalid traffic_type ({traffic_type}) - must be one of {", ".join(FLOW_LOG_TRAFFIC_TYPES)}'
            )
        for destination in destinations:
            if destination not in FLOW_LOG_DESTINATIONS:
                raise InvalidArgumentError(
                    f'Invalid flow log destination ({destination}) - must be one of {", ".join(FLOW_LOG_DESTINATIONS)}'
                )
            if destination in self.resources['flow_logs']:
                raise PreconditionViolationError(f'Flow logs to {destination} are already configured on {self.name}')
        if FLOW_LOG_DESTINATION_CLOUDWATCH in destinations and encryption_key is None:
            raise InvalidArgumentError('encryption_key not provided for cloud-watch-logs flow log')
        if FLOW_LOG_DESTINATION_S3 in destinations and bucket_arn is None:
            raise InvalidArgumentError('bucket_arn not provided for s3 flow log')

        vpc = self.resources['vpc']
        flow_logs = {}

        if FLOW_LOG_DESTINATION_CLOUDWATCH in destinations:
            pulumi.debug(f'Building CloudWatch flow logs for VPC {self.name}')
            log_group = aws.cloudwatch.LogGroup(
                f'{self.name}-flowlogs',
                kms_key_id=encryption_key.arn,
                retention_in_days=log_retention_in_days,
                tags=self.tags,
                opts=pulumi.ResourceOptions(parent=self),
            )

            role = netkit.iam.ServiceRole(
                f'{self.name}-flowlogs',
                self.project,
                service_principal=FLOW_LOG_SERVICE_PRINCIPAL,
                description=f'Delivers flow logs for VPC {self.name} to CloudWatch',
                exclude_from_project=True,
                tags=self.tags,
                opts=pulumi.ResourceOptions(parent=self),
            )
            policy = role.add_policy_statement(
                sid='AllowFlowLogDelivery',
                actions=FLOW_LOG_CLOUDWATCH_ACTIONS,
                resources=[log_group.arn],
            )

            flow_logs[FLOW_LOG_DESTINATION_CLOUDWATCH] = aws.ec2.FlowLog(
                f'{self.name}-flowlog-cwl',
                iam_role_arn=role.role_arn,
                log_destination=log_group.arn,
                log_destination_type=FLOW_LOG_DESTINATION_CLOUDWATCH,
                log_format=log_format,
                max_aggregation_interval=max_aggregation_interval,
                traffic_type=traffic_type,
                vpc_id=vpc.id,
                tags=self.tags_with_name(f'{self.name}-cwl'),
                opts=pulumi.ResourceOptions(parent=self, depends_on=[vpc, log_group, policy]),
            )
            self.resources['flow_logs_group'] = log_group
            self.resources['flow_logs_role'] = role

        if FLOW_LOG_DESTINATION_S3 in destinations:
            pulumi.debug(f'Building S3 flow logs for VPC {self.name}')
            flow_logs[FLOW_LOG_DESTINATION_S3] = aws.ec2.FlowLog(
                f'{self.name}-flowlog-s3',
                log_destination=bucket_arn,
                log_destination_type=FLOW_LOG_DESTINATION_S3,
                log_format=log_format,
                max_aggregation_interval=max_aggregation_interval,
                traffic_type=traffic_type,
                vpc_id=vpc.id,
                tags=self.tags_with_name(f'{self.name}-s3'),
                opts=pulumi.ResourceOptions(parent=self, depends_on=[vpc]),
            )

        self.resources['flow_logs'].update(flow_logs)

        return flow_logs


class RouteTable(netkit.NetkitComponentResource):
    """**Pulumi Type:** ``netkit:network:RouteTable``

    Builds an empty route table in a VPC. Routes are added with the ``add_*_route`` methods.

    Produces the following ``resources``:

        - *route_table* - The `aws.ec2.RouteTable
          <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/routetable/>`_.
        - *routes* - Dict of `aws.ec2.Routes <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/route/>`_ keyed
          by name.

    :param name: A string identifying this set of resources. Also used as the route table's ``Name`` tag.
    :type name: str

    :param project: The NetkitProject to add these resources to.
    :type project: netkit.NetkitProject

    :param vpc: The VPC to build the route table in.
    :type vpc: VpcReference

    :param opts: Additional pulumi.ResourceOptions to apply to these resources. Defaults to None.
    :type opts: pulumi.ResourceOptions, optional

    :param kwargs: Any other keyword arguments which will be passed as inputs to the NetkitComponentResource
        superconstructor.
    """

    def __init__(
        self,
        name: str,
        project: netkit.NetkitProject,
        vpc: VpcReference,
        opts: pulumi.ResourceOptions = None,
        **kwargs,
    ):
        super().__init__('netkit:network:RouteTable', name, project, opts=opts, **kwargs)

        self.vpc: VpcReference = vpc  #: The VPC this route table belongs to

        route_table = aws.ec2.RouteTable(
            f'{name}-rt',
            vpc_id=vpc.vpc_id,
            tags=self.tags_with_name(name),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.finish(
            resources={
                'route_table': route_table,
                'routes': {},
            },
        )

    @property
    def route_table_id(self) -> pulumi.Output[str]:
        return self.resources['route_table'].id

    def __route(self, name: str, depends_on: list = None, **kwargs) -> aws.ec2.Route:
        if name in self.resources['routes']:
            raise PreconditionViolationError(f'A route named {name} already exists in route table {self.name}')

        route = aws.ec2.Route(
            f'{self.name}-route-{name}',
            route_table_id=self.route_table_id,
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.resources['route_table'], *(depends_on or [])]),
            **kwargs,
        )
        self.resources['routes'][name] = route
        return route

    def add_transit_gateway_route(
        self,
        name: str,
        destination_cidr_block: str,
        transit_gateway_id: str,
        transit_gateway_attachment: pulumi.Resource,
    ) -> aws.ec2.Route:
        """Routes traffic for a CIDR through a transit gateway. The route is not built until the VPC's attachment to the
        transit gateway exists, since AWS rejects routes to a transit gateway the VPC is not attached to.

        :param name: A string identifying the route within this route table.
        :type name: str

        :param destination_cidr_block: The CIDR to route.
        :type destination_cidr_block: str

        :param transit_gateway_id: ID of the transit gateway to route through.
        :type transit_gateway_id: str

        :param transit_gateway_attachment: The resource attaching this route table's VPC to the transit gateway.
        :type transit_gateway_attachment: pulumi.Resource

        :return: The route.
        :rtype: aws.ec2.Route

        :raises PreconditionViolationError: Thrown if this route table already has a route with the same name.
        """

        return self.__route(
            name,
            depends_on=[transit_gateway_attachment],
            destination_cidr_block=destination_cidr_block,
            transit_gateway_id=transit_gateway_id,
        )

    def add_nat_gateway_route(self, name: str, destination_cidr_block: str, nat_gateway_id: str) -> aws.ec2.Route:
        """Routes traffic for a CIDR through a NAT Gateway.

        :param name: A string identifying the route within this route table.
        :type name: str

        :param destination_cidr_block: The CIDR to route.
        :type destination_cidr_block: str

        :param nat_gateway_id: ID of the NAT Gateway to route through.
        :type nat_gateway_id: str

        :return: The route.
        :rtype: aws.ec2.Route

        :raises PreconditionViolationError: Thrown if this route table already has a route with the same name.
        """

        return self.__route(name, destination_cidr_block=destination_cidr_block, nat_gateway_id=nat_gateway_id)

    def add_internet_gateway_route(self, name: str, destination_cidr_block: str) -> aws.ec2.Route:
        """Routes traffic for a CIDR through the VPC's Internet Gateway.

        :param name: A string identifying the route within this route table.
        :type name: str

        :param destination_cidr_block: The CIDR to route.
        :type destination_cidr_block: str

        :return: The route.
        :rtype: aws.ec2.Route

        :raises PreconditionViolationError: Thrown if the VPC has no Internet Gateway, or if this route table already
            has a route with the same name.
        """

        internet_gateway_id = self.vpc.internet_gateway_id
        if internet_gateway_id is None:
            raise PreconditionViolationError('Attempting to add Internet Gateway route without an IGW defined.')

        pulumi.debug(f'Routing {destination_cidr_block} through the Internet Gateway in route table {self.name}')
        return self.__route(name, destination_cidr_block=destination_cidr_block, gateway_id=internet_gateway_id)


class Subnet(netkit.NetkitComponentResource):
    """**Pulumi Type:** ``netkit:network:Subnet``

    Builds a subnet and associates it with a route table. The association is fixed for the life of the subnet.

    Produces the following ``resources``:

        - *route_table_association* - The `aws.ec2.RouteTableAssociation
          <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/routetableassociation/>`_ binding the subnet to
          ``route_table``.
        - *subnet* - The `aws.ec2.Subnet <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/subnet/>`_.

    :param name: A string identifying this set of resources. Also used as the subnet's ``Name`` tag.
    :type name: str

    :param project: The NetkitProject to add these resources to.
    :type project: netkit.NetkitProject

    :param availability_zone: The AZ to build the subnet in, such as ``us-east-1a``.
    :type availability_zone: str

    :param cidr_block: A CIDR describing the subnet's IP space. It must lie within the VPC's CIDR; AWS enforces this.
    :type cidr_block: str

    :param vpc: The VPC to build the subnet in.
    :type vpc: VpcReference

    :param route_table: The route table governing traffic leaving this subnet.
    :type route_table: RouteTableReference

    :param map_public_ip_on_launch: When True, instances launched here get a public IP. Defaults to None.
    :type map_public_ip_on_launch: bool, optional

    :param opts: Additional pulumi.ResourceOptions to apply to these resources. Defaults to None.
    :type opts: pulumi.ResourceOptions, optional

    :param kwargs: Any other keyword arguments which will be passed as inputs to the NetkitComponentResource
        superconstructor.
    """

    def __init__(
        self,
        name: str,
        project: netkit.NetkitProject,
        availability_zone: str,
        cidr_block: str,
        vpc: VpcReference,
        route_table: RouteTableReference,
        map_public_ip_on_launch: bool = None,
        opts: pulumi.ResourceOptions = None,
        **kwargs,
    ):
        super().__init__('netkit:network:Subnet', name, project, opts=opts, **kwargs)

        self.__availability_zone = availability_zone
        self.__cidr_block = cidr_block
        self.__map_public_ip_on_launch = map_public_ip_on_launch
        self.__route_table = route_table

        subnet = aws.ec2.Subnet(
            f'{name}-subnet',
            availability_zone=availability_zone,
            cidr_block=cidr_block,
            map_public_ip_on_launch=map_public_ip_on_launch,
            vpc_id=vpc.vpc_id,
            tags=self.tags_with_name(name),
            opts=pulumi.ResourceOptions(parent=self),
        )

        route_table_association = aws.ec2.RouteTableAssociation(
            f'{name}-rtassoc',
            route_table_id=route_table.route_table_id,
            subnet_id=subnet.id,
            opts=pulumi.ResourceOptions(parent=self, depends_on=[subnet]),
        )

        self.finish(
            resources={
                'route_table_association': route_table_association,
                'subnet': subnet,
            },
        )

    @property
    def subnet_id(self) -> pulumi.Output[str]:
        return self.resources['subnet'].id

    @property
    def subnet_name(self) -> str:
        return self.name

    @property
    def availability_zone(self) -> str:
        return self.__availability_zone

    @property
    def cidr_block(self) -> str:
        return self.__cidr_block

    @property
    def map_public_ip_on_launch(self) -> bool | None:
        return self.__map_public_ip_on_launch

    @property
    def route_table(self) -> RouteTableReference:
        """The route table this subnet was associated with when it was built."""

        return self.__route_table


class NatGateway(netkit.NetkitComponentResource):
    """**Pulumi Type:** ``netkit:network:NatGateway``

    Builds a NAT Gateway in a subnet, along with the Elastic IP it translates addresses to.

    Produces the following ``resources``:

        - *eip* - The `aws.ec2.Eip <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/eip/>`_ used for the NAT
          Gateway.
        - *nat_gateway* - The `aws.ec2.NatGateway
          <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/natgateway/>`_.

    :param name: A string identifying this set of resources. Also used as the NAT Gateway's ``Name`` tag.
    :type name: str

    :param project: The NetkitProject to add these resources to.
    :type project: netkit.NetkitProject

    :param subnet: The subnet to build the NAT Gateway in. This is normally a public subnet.
    :type subnet: SubnetReference

    :param opts: Additional pulumi.ResourceOptions to apply to these resources. Defaults to None.
    :type opts: pulumi.ResourceOptions, optional

    :param kwargs: Any other keyword arguments which will be passed as inputs to the NetkitComponentResource
        superconstructor.
    """

    def __init__(
        self,
        name: str,
        project: netkit.NetkitProject,
        subnet: SubnetReference,
        opts: pulumi.ResourceOptions = None,
        **kwargs,
    ):
        super().__init__('netkit:network:NatGateway', name, project, opts=opts, **kwargs)

        eip = aws.ec2.Eip(
            f'{name}-eip',
            domain='vpc',
            tags=self.tags_with_name(name),
            opts=pulumi.ResourceOptions(parent=self),
        )
        nat_gateway = aws.ec2.NatGateway(
            f'{name}-nat',
            allocation_id=eip.allocation_id,
            subnet_id=subnet.subnet_id,
            tags=self.tags_with_name(name),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[eip]),
        )

        self.finish(
            resources={
                'eip': eip,
                'nat_gateway': nat_gateway,
            },
        )

    @property
    def nat_gateway_id(self) -> pulumi.Output[str]:
        return self.resources['nat_gateway'].id

    @property
    def nat_gateway_name(self) -> str:
        return self.name


class SecurityGroup(netkit.NetkitComponentResource):
    """**Pulumi Type:** ``netkit:network:SecurityGroup``

    Builds a security group. Rules are added one at a time with :py:meth:`add_ingress_rule` and
    :py:meth:`add_egress_rule`. Each rule names its peer with whichever of a CIDR, an IPv6 CIDR, a prefix list, or
    another security group you give it; supplying a sensible combination is up to you.

    Produces the following ``resources``:

        - *egress_rules* - Dict of `aws.vpc.SecurityGroupEgressRules
          <https://www.pulumi.com/registry/packages/aws/api-docs/vpc/securitygroupegressrule/>`_ keyed by name.
        - *ingress_rules* - Dict of `aws.vpc.SecurityGroupIngressRules
          <https://www.pulumi.com/registry/packages/aws/api-docs/vpc/securitygroupingressrule/>`_ keyed by name.
        - *sg* - The `aws.ec2.SecurityGroup <https://www.pulumi.com/registry/packages/aws/api-docs/ec2/securitygroup/>`_.

    :param name: A string identifying this set of resources.
    :type name: str

    :param project: The NetkitProject to add these resources to.
    :type project: netkit.NetkitProject

    :param vpc: The VPC this security group belongs to.
    :type vpc: VpcReference

    :param security_group_name: An explicit name for the group. It is not recommended to set this, since a group with
        an explicit name cannot be replaced without first being deleted. Defaults to None, a generated name.
    :type security_group_name: str, optional

    :param description: Description of the security group. Defaults to None, the provider's default description.
    :type description: str, optional

    :param opts: Additional pulumi.ResourceOptions to apply to these resources. Defaults to None.
    :type opts: pulumi.ResourceOptions, optional

    :param kwargs: Any other keyword arguments which will be passed as inputs to the NetkitComponentResource
        superconstructor.
    """

    def __init__(
        self,
        name: str,
        project: netkit.NetkitProject,
        vpc: VpcReference,
        security_group_name: str = None,
        description: str = None,
        opts: pulumi.ResourceOptions = None,
        **kwargs,
    ):
        super().__init__('netkit:network:SecurityGroup', name, project, opts=opts, **kwargs)

        sg = aws.ec2.SecurityGroup(
            f'{name}-sg',
            name=security_group_name,
            description=description,
            vpc_id=vpc.vpc_id,
            tags=self.tags_with_name(security_group_name or name),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.finish(
            resources={
                'egress_rules': {},
                'ingress_rules': {},
                'sg': sg,
            },
        )

    @property
    def security_group_id(self) -> pulumi.Output[str]:
        return self.resources['sg'].id

    def add_ingress_rule(
        self,
        name: str,
        ip_protocol: str,
        description: str = None,
        cidr_ip: str = None,
        cidr_ipv6: str = None,
        source_prefix_list_id: str = None,
        source_security_group: SecurityGroupReference = None,
        from_port: int = None,
        to_port: int = None,
    ) -> aws.vpc.SecurityGroupIngressRule:
        """Allows inbound traffic.

        :param name: A string identifying the rule within this security group.
        :type name: str

        :param ip_protocol: IP protocol name or number, such as ``tcp``, or ``-1`` for all protocols.
        :type ip_protocol: str

        :param description: Description of the rule. Defaults to None.
        :type description: str, optional

        :param cidr_ip: IPv4 CIDR the traffic may come from. Defaults to None.
        :type cidr_ip: str, optional

        :param cidr_ipv6: IPv6 CIDR the traffic may come from. Defaults to None.
        :type cidr_ipv6: str, optional

        :param source_prefix_list_id: ID of a prefix list the traffic may come from. Defaults to None.
        :type source_prefix_list_id: str, optional

        :param source_security_group: Security group whose members the traffic may come from. Defaults to None.
        :type source_security_group: SecurityGroupReference, optional

        :param from_port: Start of the port range. Defaults to None.
        :type from_port: int, optional

        :param to_port: End of the port range. Defaults to None.
        :type to_port: int, optional

        :return: The rule.
        :rtype: aws.vpc.SecurityGroupIngressRule

        :raises PreconditionViolationError: Thrown if this security group already has an ingress rule with the same
            name.
        """

        if name in self.resources['ingress_rules']:
            raise PreconditionViolationError(f'An ingress rule named {name} already exists on {self.name}')

        rule = aws.vpc.SecurityGroupIngressRule(
            f'{self.name}-ingress-{name}',
            security_group_id=self.security_group_id,
            ip_protocol=ip_protocol,
            description=description,
            cidr_ipv4=cidr_ip,
            cidr_ipv6=cidr_ipv6,
            prefix_list_id=source_prefix_list_id,
            referenced_security_group_id=_security_group_id(source_security_group),
            from_port=from_port,
            to_port=to_port,
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.resources['sg']], delete_before_replace=True),
        )
        self.resources['ingress_rules'][name] = rule

        return rule

    def add_egress_rule(
        self,
        name: str,
        ip_protocol: str,
        description: str = None,
        cidr_ip: str = None,
        cidr_ipv6: str = None,
        destination_prefix_list_id: str = None,
        destination_security_group: SecurityGroupReference = None,
        from_port: int = None,
        to_port: int = None,
    ) -> aws.vpc.SecurityGroupEgressRule:
        """Allows outbound traffic. Parameters mirror :py:meth:`add_ingress_rule`, naming where the traffic may go
        instead of where it may come from.

        :return: The rule.
        :rtype: aws.vpc.SecurityGroupEgressRule

        :raises PreconditionViolationError: Thrown if this security group already has an egress rule with the same
            name.
        """

        if name in self.resources['egress_rules']:
            raise PreconditionViolationError(f'An egress rule named {name} already exists on {self.name}')

        rule = aws.vpc.SecurityGroupEgressRule(
            f'{self.name}-egress-{name}',
            security_group_id=self.security_group_id,
            ip_protocol=ip_protocol,
            description=description,
            cidr_ipv4=cidr_ip,
            cidr_ipv6=cidr_ipv6,
            prefix_list_id=destination_prefix_list_id,
            referenced_security_group_id=_security_group_id(destination_security_group),
            from_port=from_port,
            to_port=to_port,
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.resources['sg']], delete_before_replace=True),
        )
        self.resources['egress_rules'][name] = rule

        return rule


def _security_group_id(security_group: SecurityGroupReference | None) -> pulumi.Output[str] | None:
    return security_group.security_group_id if security_group is not None else None
