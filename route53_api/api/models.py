"""
Response-shaped domain objects for the Route 53 API
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChangeStatus(str, Enum):
    PENDING = "PENDING"
    INSYNC = "INSYNC"


class ChangeAction(str, Enum):
    CREATE = "CREATE"
    DELETE = "DELETE"
    UPSERT = "UPSERT"


class HostedZoneConfig(BaseModel):
    comment: Optional[str] = None
    private_zone: Optional[bool] = None


class HostedZone(BaseModel):
    id: str
    name: str
    caller_reference: Optional[str] = None
    config: Optional[HostedZoneConfig] = None
    resource_record_set_count: Optional[int] = None

    @property
    def zone_id(self) -> str:
        """Id without the '/hostedzone/' prefix"""
        return self.id.rsplit("/", 1)[-1]


class DelegationSet(BaseModel):
    name_servers: List[str] = Field(default_factory=list)


class ChangeInfo(BaseModel):
    id: str
    status: ChangeStatus
    submitted_at: datetime
    comment: Optional[str] = None

    @property
    def is_in_sync(self) -> bool:
        return self.status is ChangeStatus.INSYNC


class HostedZoneList(BaseModel):
    hosted_zones: List[HostedZone] = Field(default_factory=list)
    next_marker: Optional[str] = None
    marker: Optional[str] = None
    max_items: Optional[int] = None
    is_truncated: Optional[bool] = None


class HostedZoneDetail(BaseModel):
    hosted_zone: HostedZone
    delegation_set: DelegationSet


class CreatedHostedZone(BaseModel):
    hosted_zone: HostedZone
    change_info: ChangeInfo
    delegation_set: DelegationSet


class AliasTarget(BaseModel):
    hosted_zone_id: str
    dns_name: str
    evaluate_target_health: Optional[bool] = None


class ResourceRecordSet(BaseModel):
    name: str
    type: str
    ttl: Optional[int] = None
    records: List[str] = Field(default_factory=list)
    set_identifier: Optional[str] = None
    weight: Optional[int] = None
    region: Optional[str] = None
    alias_target: Optional[AliasTarget] = None


class ResourceRecordSetChange(BaseModel):
    action: ChangeAction
    record_set: ResourceRecordSet


class ResourceRecordSetList(BaseModel):
    record_sets: List[ResourceRecordSet] = Field(default_factory=list)
    is_truncated: bool = False
    max_items: Optional[int] = None
    next_record_name: Optional[str] = None
    next_record_type: Optional[str] = None
    next_record_identifier: Optional[str] = None


class ErrorInfo(BaseModel):
    """What the client's last-error slot holds after a failed call"""
    type: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None
    request_id: Optional[str] = None
    status_code: Optional[int] = None


class LookupStatus(str, Enum):
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"


class ZoneLookup(BaseModel):
    """
    Result of a search by zone name.

    Keeps 'no such zone' apart from 'the search itself failed': on ERROR the
    raised API error is attached and the client's last-error slot is set.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: LookupStatus
    zone: Optional[HostedZoneDetail] = None
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND
