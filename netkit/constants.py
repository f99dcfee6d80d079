"""Some global values that should not change often and do not rely on runtime data."""

#: AWS IAM Assume Role Policies often follow this template.
ASSUME_ROLE_POLICY = {
    'Version': '2012-10-17',
    'Statement': [{'Sid': '', 'Effect': 'Allow', 'Principal': {'Service': None}, 'Action': 'sts:AssumeRole'}],
}

# Global default values to fall back on
DEFAULT_PROTECTED_STACKS = ['prod']  #: Which Pulumi stacks should get resource protection by default
DISABLE_PROTECTION_ENV_VAR = 'NETKIT_DISABLE_PROTECTION'  #: Set this to "True" to lift resource protection

#: Valid settings for a VPC's ``instance_tenancy``
INSTANCE_TENANCIES = ['default', 'dedicated']

#: IAM policies often extend this template.
IAM_POLICY_DOCUMENT = {'Version': '2012-10-17', 'Statement': [{'Sid': 'DefaultSid', 'Effect': 'Allow'}]}

# VPC flow log settings
FLOW_LOG_DESTINATION_CLOUDWATCH = 'cloud-watch-logs'  #: Flow logs delivered to a CloudWatch log group
FLOW_LOG_DESTINATION_S3 = 's3'  #: Flow logs delivered to an S3 bucket
FLOW_LOG_DESTINATIONS = [FLOW_LOG_DESTINATION_CLOUDWATCH, FLOW_LOG_DESTINATION_S3]
FLOW_LOG_MAX_AGGREGATION_INTERVALS = [60, 600]  #: Seconds; AWS accepts no other values
FLOW_LOG_TRAFFIC_TYPES = ['ALL', 'ACCEPT', 'REJECT']
FLOW_LOG_SERVICE_PRINCIPAL = 'vpc-flow-logs.amazonaws.com'
FLOW_LOG_DEFAULT_RETENTION_DAYS = 731

#: Actions the flow logs service needs on its log group to deliver logs
FLOW_LOG_CLOUDWATCH_ACTIONS = [
    'logs:CreateLogDelivery',
    'logs:CreateLogGroup',
    'logs:CreateLogStream',
    'logs:DeleteLogDelivery',
    'logs:DescribeLogGroups',
    'logs:DescribeLogStreams',
    'logs:PutLogEvents',
]
