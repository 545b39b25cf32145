#!/usr/bin/env python3
import logging
import os

import aws_cdk as cdk
from stacks.config import SiteConfig
from stacks.site_stack import SpaSiteStack

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("spa-s3-cf")

app = cdk.App()

# Hosted zone lookups need a concrete account/region
env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION", "us-east-1")
)

config = SiteConfig.from_context(app.node, app_dir=os.path.dirname(os.path.abspath(__file__)))
logger.info("Synthesizing site %s for %s/%s", config.site_domain, env.account, env.region)

SpaSiteStack(app, "SpaS3CfStack",
             env=env,
             config=config)

app.synth()
