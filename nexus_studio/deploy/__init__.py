"""Deployment subsystem."""

from nexus_studio.deploy.targets import (
    DEPLOY_TARGETS,
    DeployOptions,
    DeployReport,
    DeployTarget,
    get_target,
    run_deployment,
)

__all__ = [
    "DEPLOY_TARGETS",
    "DeployOptions",
    "DeployReport",
    "DeployTarget",
    "get_target",
    "run_deployment",
]
