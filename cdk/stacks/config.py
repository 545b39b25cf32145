import os
from dataclasses import dataclass
from typing import Optional

from constructs import Node

# Asset directory uploaded to the site bucket, relative to the cdk app directory
DEFAULT_SITE_CONTENTS = "../site-contents"

DEFAULT_STAGE_NAME = "v1"


class MissingContextError(ValueError):
    """Raised when a required CDK context value was not supplied."""

    def __init__(self, key: str):
        super().__init__(
            f"Missing required context value '{key}'. "
            f"Set it in cdk.json or pass -c {key}=<value>.")
        self.key = key


@dataclass(frozen=True)
class SiteConfig:
    domain_name: str
    site_sub_domain: str
    certificate_arn: str
    site_contents_path: str = DEFAULT_SITE_CONTENTS
    api_stage_name: str = DEFAULT_STAGE_NAME

    @property
    def site_domain(self) -> str:
        return self.site_sub_domain + "." + self.domain_name

    @classmethod
    def from_context(cls, node: Node, app_dir: Optional[str] = None) -> "SiteConfig":
        """Build the config from CDK context (cdk.json or -c flags).

        A relative site contents path is resolved against ``app_dir`` when
        given, otherwise against the working directory at synth time.
        """
        site_contents_path = node.try_get_context("siteContentsPath") or DEFAULT_SITE_CONTENTS
        if app_dir and not os.path.isabs(site_contents_path):
            site_contents_path = os.path.normpath(os.path.join(app_dir, site_contents_path))

        return cls(
            domain_name=_require(node, "domainName"),
            site_sub_domain=_require(node, "siteSubDomain"),
            certificate_arn=_require(node, "certificateArn"),
            site_contents_path=site_contents_path,
            api_stage_name=node.try_get_context("apiStageName") or DEFAULT_STAGE_NAME,
        )


def _require(node: Node, key: str) -> str:
    value: Optional[str] = node.try_get_context(key)
    if not value:
        raise MissingContextError(key)
    return value
