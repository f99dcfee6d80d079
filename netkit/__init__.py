"""Declarative building blocks for AWS networking in Pulumi programs. A program builds one
:py:class:`netkit.NetkitProject`, then composes the components in :py:mod:`netkit.network` with it.
"""

import boto3
import pulumi
import yaml

from functools import cached_property
from netkit.constants import DEFAULT_PROTECTED_STACKS, DISABLE_PROTECTION_ENV_VAR
from os import environ


#: Type alias representing valid types to be found among a NetkitProject's resources
type Flattenable = dict | list | NetkitComponentResource | pulumi.Output | pulumi.Resource


class NetkitProject:
    """A collection of related network components which share naming, tagging, and protection settings. Every
    component takes the project explicitly; there is no implicit default project.

    :param protected_stacks: List of stack names which should require explicit instruction to modify. Defaults to
        :py:data:`netkit.constants.DEFAULT_PROTECTED_STACKS`.
    :type protected_stacks: list[str], optional
    """

    def __init__(self, protected_stacks: list[str] = DEFAULT_PROTECTED_STACKS):
        #: Name of the Pulumi project
        self.project: str = pulumi.get_project()
        #: Name of the Pulumi stack
        self.stack: str = pulumi.get_stack()
        #: Convenience prefix for naming resources consistently
        self.name_prefix: str = f'{self.project}-{self.stack}'
        #: List of stacks to apply resource deletion protection to
        self.protected_stacks: list[str] = protected_stacks
        #: Pulumi configuration data referencing Pulumi.stack.yaml
        self.pulumi_config: pulumi.config.Config = pulumi.Config()
        #: Components registered with this project, keyed by name
        self.resources: dict = {}

        self.common_tags: dict = {  #: Tags to apply to all taggable resources
            'environment': self.stack,
            'project': self.project,
            'pulumi_project': self.project,
            'pulumi_stack': self.stack,
        }

        #: Currently configured AWS region
        self.aws_region: str = boto3.session.Session().region_name

    @cached_property
    def config(self) -> dict:
        """Provides read-only access to the project configuration, which is expected to be in the root of your Pulumi
        project directory, and should match the current stack. For example, ``config.preprod.yaml`` would be a
        configuration for an environment called "preprod"."""

        config_file = f'config.{self.stack}.yaml'
        with open(config_file, 'r') as fh:
            return yaml.load(fh.read(), Loader=yaml.SafeLoader)

    def flatten(self) -> set[pulumi.Resource]:
        """Returns a flat set of all resources existing within this project."""

        return flatten(self.resources)


class NetkitComponentResource(pulumi.ComponentResource):
    """A ``pulumi.ComponentResource`` which handles the common elements of netkit components: naming, tagging, resource
    protection, and registration with a :py:class:`netkit.NetkitProject`.

    :param pulumi_type: The "type" string (commonly referred to in docs as just ``t``) of the component as described
        by `Pulumi's docs <https://www.pulumi.com/docs/concepts/resources/names/#types>`_.
    :type pulumi_type: str

    :param name: An identifier for this set of resources. Generally, this gets used as part of all resources defined
        by the component.
    :type name: str

    :param project: The project this resource belongs to.
    :type project: :py:class:`netkit.NetkitProject`

    :param exclude_from_project: When ``True``, this component is not registered directly with the project. It can
        still be found by the project's ``flatten`` function if it is nested within a registered component. Components
        built inside other components should set this. Defaults to ``False``.
    :type exclude_from_project: bool, optional

    :param opts: Additional ``pulumi.ResourceOptions`` to apply to this resource. Defaults to None.
    :type opts: pulumi.ResourceOptions, optional

    :param tags: Key/value pairs to merge with the default tags which get applied to all resources in this group.
        Defaults to {}.
    :type tags: dict, optional
    """

    def __init__(
        self,
        pulumi_type: str,
        name: str,
        project: NetkitProject,
        exclude_from_project: bool = False,
        opts: pulumi.ResourceOptions = None,
        tags: dict = {},
    ):
        self.name: str = name  #: Identifier for this set of resources.
        self.project: NetkitProject = project  #: Project this resource is a member of.
        self.exclude_from_project = exclude_from_project

        if self.protect_resources:
            pulumi.info(
                f'Resource protection has been enabled on {name}. To disable, export {DISABLE_PROTECTION_ENV_VAR}=True'
            )

        # Merge provided opts with defaults before calling superconstructor
        default_opts = pulumi.ResourceOptions(protect=self.protect_resources)
        final_opts = default_opts.merge(opts)
        super().__init__(t=pulumi_type, name=name, opts=final_opts)

        self.tags: dict = self.project.common_tags.copy()  #: Tags to apply to all taggable resources
        self.tags.update(tags)

        self.resources: dict = {}  #: Resources which are members of this component.

    def finish(self, resources: dict[str, Flattenable] = {}):
        """Stores the mapping of ``resources`` on this component and registers it with the project, where the resources
        can be acted on collectively. Every component calls this at the end of its ``__init__`` function. Methods which
        add declarations later extend the same dict, so the project always sees the current state.

        :param resources: Dict of Pulumi resources this component contains. Defaults to {}.
        :type resources: dict[str, Flattenable], optional
        """

        self.resources = resources
        self.register_outputs({})

        if not self.exclude_from_project:
            self.project.resources[self.name] = self.resources

    def tags_with_name(self, name: str) -> dict:
        """Returns this component's tags with a ``Name`` tag set to ``name``."""

        tags = {'Name': name}
        tags.update(self.tags)
        return tags

    @property
    def protect_resources(self) -> bool:
        """Determines whether resources should have protection against changes enabled. Resources are unprotected when
        they are not part of a protected stack, or when ``NETKIT_DISABLE_PROTECTION=True`` is set in the environment."""

        if self.project.stack not in self.project.protected_stacks:
            protect = False
        else:
            protect = not env_var_is_true(DISABLE_PROTECTION_ENV_VAR)

        return protect


def env_var_matches(name: str, matches: list[str], default: bool = False) -> bool:
    """Determines if the value of the given environment variable is in the given list. This is a case-insensitive check.

    :param name: The environment variable to check
    :type name: str

    :param matches: A list of strings to match against
    :type matches: list[str]

    :param default: Default value if the variable doesn't match. Defaults to False.
    :type default: bool, optional

    :return: True if the value of the given environment variable is in the given list, the provided `default` value if
        it is not, or `None` if the variable is unset.
    :rtype: bool
    """

    matches = [match.lower() for match in matches]
    value = environ.get(name, None)
    if value is None:
        return None
    if value.lower() in matches:
        return True
    return default


def env_var_is_true(name: str) -> bool:
    """Determines if the value of the given environment variable represents "True" in some way.

    :param name: The environment variable to check
    :type name: str

    :return: `True` if the value of the environment variable looks like it is set to an affirmative value, otherwise
        `False`.
    :rtype: bool
    """

    return bool(env_var_matches(name, ['t', 'true', 'yes'], False))


def flatten(item: Flattenable) -> set[pulumi.Resource]:
    """Recursively traverses a nested collection of Pulumi ``Resource`` s, converting them into a flat set which can be
    more easily iterated over.

    :param item: An item which we intend to flatten. Must be one of the recognized types or collections defined in
        the Flattenable type alias.
    :type item: dict | list | NetkitComponentResource

    :return: A ``set`` of Pulumi ``Resource`` s contained within the collection.
    :rtype: set(pulumi.Resource)
    """

    # Collections get compressed into a flat list first, then we operate on their items
    flattened = []
    to_flatten = None
    if type(item) is list:
        to_flatten = item
    elif type(item) is dict:
        to_flatten = item.values()
    elif isinstance(item, NetkitComponentResource):
        to_flatten = item.resources.values()
    elif isinstance(item, pulumi.Resource) or isinstance(item, pulumi.Output):
        return [item]

    if to_flatten is not None:
        for item in to_flatten:
            flattened.extend(flatten(item))

    return set(flattened)
