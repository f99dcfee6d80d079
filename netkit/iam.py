"""Infrastrucutural patterns related to `AWS IAM <https://docs.aws.amazon.com/iam/>`_."""

import json
import netkit
import pulumi
import pulumi_aws as aws

from copy import deepcopy
from netkit.constants import ASSUME_ROLE_POLICY, IAM_POLICY_DOCUMENT
from netkit.exceptions import PreconditionViolationError


class ServiceRole(netkit.NetkitComponentResource):
    """**Pulumi Type:** ``netkit:iam:ServiceRole``

    Builds an IAM role which only the given AWS service can assume. Permissions are granted afterward, one statement at
    a time, with :py:meth:`add_policy_statement`.

    Produces the following ``resources``:

        - *role* - The `aws.iam.Role <https://www.pulumi.com/registry/packages/aws/api-docs/iam/role/>`_.
        - *policies* - Dict of inline `aws.iam.RolePolicies
          <https://www.pulumi.com/registry/packages/aws/api-docs/iam/rolepolicy/>`_ keyed by statement ID.

    :param name: A string identifying this set of resources.
    :type name: str

    :param project: The NetkitProject to add these resources to.
    :type project: netkit.NetkitProject

    :param service_principal: The service allowed to assume this role, such as ``vpc-flow-logs.amazonaws.com``.
    :type service_principal: str

    :param description: Description of the role. Defaults to None.
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
        service_principal: str,
        description: str = None,
        opts: pulumi.ResourceOptions = None,
        **kwargs,
    ):
        super().__init__('netkit:iam:ServiceRole', name, project, opts=opts, **kwargs)

        # Update the assume role policy's principal in a copy of our template
        arp = deepcopy(ASSUME_ROLE_POLICY)
        arp['Statement'][0]['Principal']['Service'] = service_principal

        role = aws.iam.Role(
            f'{name}-role',
            assume_role_policy=json.dumps(arp),
            description=description,
            tags=self.tags,
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.finish(
            resources={
                'policies': {},
                'role': role,
            },
        )

    @property
    def role_arn(self) -> pulumi.Output[str]:
        """ARN of the role, used wherever a service must be told which role to deliver through."""

        return self.resources['role'].arn

    def add_policy_statement(self, sid: str, actions: list[str], resources: list) -> aws.iam.RolePolicy:
        """Attaches an inline policy to the role containing a single statement which allows ``actions`` on
        ``resources``.

        :param sid: Statement ID. IAM requires this to be alphanumeric. It also names the inline policy.
        :type sid: str

        :param actions: IAM actions to allow.
        :type actions: list[str]

        :param resources: ARNs the actions are allowed on. These may be ``pulumi.Output`` s.
        :type resources: list

        :return: The inline policy.
        :rtype: aws.iam.RolePolicy

        :raises PreconditionViolationError: Thrown if the role already has a policy with the same statement ID.
        """

        if sid in self.resources['policies']:
            raise PreconditionViolationError(f'A policy statement with sid {sid} already exists on {self.name}')

        role = self.resources['role']

        def __policy_doc(arns: list[str]) -> str:
            doc = deepcopy(IAM_POLICY_DOCUMENT)
            doc['Statement'][0].update({'Sid': sid, 'Action': actions, 'Resource': arns})
            return json.dumps(doc)

        policy = aws.iam.RolePolicy(
            f'{self.name}-policy-{sid}',
            role=role.id,
            policy=pulumi.Output.all(*resources).apply(__policy_doc),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[role]),
        )
        self.resources['policies'][sid] = policy

        return policy
