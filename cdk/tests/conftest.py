import os

import aws_cdk as cdk
import pytest
from aws_cdk import assertions

from stacks.config import SiteConfig
from stacks.site_stack import SpaSiteStack

CERTIFICATE_ARN = "arn:aws:acm:us-east-1:123456789012:certificate/11111111-2222-3333-4444-555555555555"

# Directory holding app.py and cdk.json
CDK_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def cdk_dir():
    return CDK_DIR


@pytest.fixture
def site_config():
    return SiteConfig(domain_name="example.com",
                      site_sub_domain="spa",
                      certificate_arn=CERTIFICATE_ARN,
                      site_contents_path=os.path.join(CDK_DIR, "..", "site-contents"))


@pytest.fixture
def make_stack():
    def _make(config, construct_id="TestSpaS3CfStack"):
        app = cdk.App()
        return SpaSiteStack(app, construct_id,
                            config=config,
                            env=cdk.Environment(account="123456789012", region="us-east-1"))
    return _make


@pytest.fixture
def stack(make_stack, site_config):
    return make_stack(site_config)


@pytest.fixture
def template(stack):
    return assertions.Template.from_stack(stack)
