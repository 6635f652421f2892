"""Controllers: the cluster collaborator and the root state machine."""

from podlens.controllers.base import BaseController
from podlens.controllers.cluster import ClusterController
from podlens.controllers.root import RootController

__all__ = ["BaseController", "ClusterController", "RootController"]
