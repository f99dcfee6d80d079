import pulumi
import pytest

import netkit
from netkit.network import Vpc


def test_project_naming_and_tags(project):
    assert project.project == 'netkit'
    assert project.stack == 'test'
    assert project.name_prefix == 'netkit-test'
    assert project.aws_region == 'us-east-1'
    assert project.common_tags == {
        'environment': 'test',
        'project': 'netkit',
        'pulumi_project': 'netkit',
        'pulumi_stack': 'test',
    }


def test_config_reads_stack_yaml(project, tmp_path, monkeypatch):
    (tmp_path / 'config.test.yaml').write_text('resources:\n  netkit:network:Vpc:\n    main:\n      cidr_block: 10.1.0.0/16\n')
    monkeypatch.chdir(tmp_path)

    assert project.config['resources']['netkit:network:Vpc']['main']['cidr_block'] == '10.1.0.0/16'


def test_components_register_with_project(project):
    vpc = Vpc('project-vpc', project, cidr_block='10.0.0.0/16', internet_gateway=True)

    assert project.resources['project-vpc'] is vpc.resources
    flattened = project.flatten()
    assert vpc.resources['vpc'] in flattened
    assert vpc.resources['internet_gateway'] in flattened


def test_excluded_components_are_not_registered(project):
    Vpc('hidden-vpc', project, cidr_block='10.0.0.0/16', exclude_from_project=True)

    assert 'hidden-vpc' not in project.resources


def test_flatten_nested_collections():
    class Thing(pulumi.CustomResource):
        def __init__(self, name):
            super().__init__('netkit:test:Thing', name, {})

    one, two, three = Thing('flatten-one'), Thing('flatten-two'), Thing('flatten-three')

    assert netkit.flatten({'a': [one, {'b': two}], 'c': three, 'd': None}) == {one, two, three}


def test_resources_unprotected_outside_protected_stacks(project):
    vpc = Vpc('unprotected-vpc', project, cidr_block='10.0.0.0/16')

    assert vpc.protect_resources is False


def test_resources_protected_in_protected_stacks(mocker, monkeypatch):
    mocker.patch('boto3.session.Session')
    monkeypatch.delenv('NETKIT_DISABLE_PROTECTION', raising=False)
    project = netkit.NetkitProject(protected_stacks=['test'])

    vpc = Vpc('protected-vpc', project, cidr_block='10.0.0.0/16')

    assert vpc.protect_resources is True


def test_protection_can_be_disabled(mocker, monkeypatch):
    mocker.patch('boto3.session.Session')
    monkeypatch.setenv('NETKIT_DISABLE_PROTECTION', 'True')
    project = netkit.NetkitProject(protected_stacks=['test'])

    vpc = Vpc('disabled-protection-vpc', project, cidr_block='10.0.0.0/16')

    assert vpc.protect_resources is False


@pytest.mark.parametrize(
    'value,expected',
    [
        ('true', True),
        ('YES', True),
        ('t', True),
        ('false', False),
        ('0', False),
    ],
)
def test_env_var_is_true(monkeypatch, value, expected):
    monkeypatch.setenv('NETKIT_TEST_FLAG', value)

    assert netkit.env_var_is_true('NETKIT_TEST_FLAG') is expected


def test_env_var_matches_unset(monkeypatch):
    monkeypatch.delenv('NETKIT_TEST_FLAG', raising=False)

    assert netkit.env_var_matches('NETKIT_TEST_FLAG', ['x']) is None
    assert netkit.env_var_is_true('NETKIT_TEST_FLAG') is False
