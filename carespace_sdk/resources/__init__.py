"""Endpoint groups exposed on ``CarespaceClient``."""

from .activity_stream import ActivityStreamResource
from .auth import AuthResource
from .base import BaseResource
from .clients import ClientsResource
from .evaluations import EvaluationsResource
from .plans import PlansResource
from .posture import PostureResource
from .programs import ProgramsResource
from .reports import ReportsResource
from .rom import RomResource
from .settings import SettingsResource
from .stats import StatsResource
from .surveys import SurveysResource
from .users import UsersResource
from .vr import VRResource

__all__ = [
    "ActivityStreamResource",
    "AuthResource",
    "BaseResource",
    "ClientsResource",
    "EvaluationsResource",
    "PlansResource",
    "PostureResource",
    "ProgramsResource",
    "ReportsResource",
    "RomResource",
    "SettingsResource",
    "StatsResource",
    "SurveysResource",
    "UsersResource",
    "VRResource",
]
