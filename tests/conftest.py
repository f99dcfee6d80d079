"""Shared fixtures. Every test runs against Pulumi's mock runtime, so nothing is deployed and no AWS API is called."""

import pulumi
import pytest

from pulumi.runtime import Mocks


class NetkitMocks(Mocks):
    """Echoes inputs back as resource state, adding the computed attributes our components read from their children."""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs) -> tuple[str, dict]:
        outputs = dict(args.inputs)
        outputs.setdefault('arn', f'arn:aws:mock:us-east-1:123456789012:{args.name}')
        if args.typ == 'aws:ec2/eip:Eip':
            outputs.setdefault('allocationId', f'{args.name}-alloc')
        return (f'{args.name}-id', outputs)

    def call(self, args: pulumi.runtime.MockCallArgs) -> tuple[dict, list]:
        return ({}, [])


pulumi.runtime.set_mocks(NetkitMocks(), project='netkit', stack='test', preview=False)

import netkit  # noqa: E402


@pytest.fixture
def project(mocker):
    """A project whose AWS session is mocked out to report the us-east-1 region."""

    session = mocker.patch('boto3.session.Session')
    session.return_value.region_name = 'us-east-1'
    return netkit.NetkitProject()
