"""Core data types for sites, channels and content items.

Records are frozen: they are read-only views materialized by the store for
the duration of one resolution call.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Mode(str, Enum):
    """Which address space a URL is computed for."""

    PUBLISHED = "published"
    PREVIEW = "preview"


class EntityKind(str, Enum):
    CHANNEL = "channel"
    CONTENT = "content"


class LinkType(str, Enum):
    """Routing policy of a channel.

    Values match the names stored by the publishing platform so fixtures and
    database rows can be parsed directly.
    """

    NONE = "None"
    NO_LINK = "NoLink"
    NO_LINK_IF_CONTENT_NOT_EXISTS = "NoLinkIfContentNotExists"
    LINK_TO_ONLY_ONE_CONTENT = "LinkToOnlyOneContent"
    NO_LINK_IF_CONTENT_NOT_EXISTS_AND_LINK_TO_ONLY_ONE_CONTENT = "NoLinkIfContentNotExistsAndLinkToOnlyOneContent"
    LINK_TO_FIRST_CONTENT = "LinkToFirstContent"
    NO_LINK_IF_CONTENT_NOT_EXISTS_AND_LINK_TO_FIRST_CONTENT = "NoLinkIfContentNotExistsAndLinkToFirstContent"
    NO_LINK_IF_CHANNEL_NOT_EXISTS = "NoLinkIfChannelNotExists"
    LINK_TO_LAST_ADD_CHANNEL = "LinkToLastAddChannel"
    LINK_TO_FIRST_CHANNEL = "LinkToFirstChannel"
    NO_LINK_IF_CHANNEL_NOT_EXISTS_AND_LINK_TO_LAST_ADD_CHANNEL = "NoLinkIfChannelNotExistsAndLinkToLastAddChannel"
    NO_LINK_IF_CHANNEL_NOT_EXISTS_AND_LINK_TO_FIRST_CHANNEL = "NoLinkIfChannelNotExistsAndLinkToFirstChannel"

    @classmethod
    def parse(cls, value: Any) -> LinkType:
        """Parse a stored policy name, falling back to ``NONE`` for unknown values."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.NONE
        text = str(value).strip()
        for member in cls:
            if member.value.lower() == text.lower() or member.name.lower() == text.lower():
                return member
        return cls.NONE


class TaxisType(str, Enum):
    """Sort order used to pick the "first" content of a channel."""

    ORDER_BY_ID = "OrderById"
    ORDER_BY_ID_DESC = "OrderByIdDesc"
    ORDER_BY_CHANNEL_ID = "OrderByChannelId"
    ORDER_BY_CHANNEL_ID_DESC = "OrderByChannelIdDesc"
    ORDER_BY_ADD_DATE = "OrderByAddDate"
    ORDER_BY_ADD_DATE_DESC = "OrderByAddDateDesc"
    ORDER_BY_LAST_EDIT_DATE = "OrderByLastEditDate"
    ORDER_BY_LAST_EDIT_DATE_DESC = "OrderByLastEditDateDesc"
    ORDER_BY_TAXIS = "OrderByTaxis"
    ORDER_BY_TAXIS_DESC = "OrderByTaxisDesc"

    @property
    def descending(self) -> bool:
        return self.value.endswith("Desc")

    @property
    def field_name(self) -> str:
        match self:
            case TaxisType.ORDER_BY_ID | TaxisType.ORDER_BY_ID_DESC:
                return "id"
            case TaxisType.ORDER_BY_CHANNEL_ID | TaxisType.ORDER_BY_CHANNEL_ID_DESC:
                return "channel_id"
            case TaxisType.ORDER_BY_ADD_DATE | TaxisType.ORDER_BY_ADD_DATE_DESC:
                return "add_date"
            case TaxisType.ORDER_BY_LAST_EDIT_DATE | TaxisType.ORDER_BY_LAST_EDIT_DATE_DESC:
                return "last_edit_date"
            case _:
                return "taxis"


class TranslateContentType(str, Enum):
    """How a content item was produced from another one."""

    COPY = "Copy"
    CUT = "Cut"
    REFERENCE = "Reference"
    REFERENCE_CONTENT = "ReferenceContent"


class Site(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    site_dir: str = ""
    web_url: str = ""
    is_separated_assets: bool = False
    assets_dir: str = "upload"
    assets_url: str = ""
    table_name: str = ""


class Channel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    site_id: int
    parent_id: int = 0
    link_type: LinkType = LinkType.NONE
    link_url: str = ""
    file_path: str = ""
    content_num: int = 0
    children_count: int = 0
    default_taxis_type: TaxisType = TaxisType.ORDER_BY_TAXIS_DESC
    taxis: int = 0
    add_date: datetime | None = None
    table_name: str = ""

    @property
    def is_site_root(self) -> bool:
        return self.parent_id == 0

    @field_validator("link_type", mode="before")
    @classmethod
    def _parse_link_type(cls, value: Any) -> LinkType:
        return LinkType.parse(value)

    @field_validator("link_url", "file_path", "table_name", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Content(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    channel_id: int
    site_id: int
    source_id: int = 0
    reference_id: int = 0
    link_url: str = ""
    translate_content_type: TranslateContentType | None = None
    taxis: int = 0
    add_date: datetime | None = None
    last_edit_date: datetime | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    @property
    def follows_reference(self) -> bool:
        """True for an alias whose target must be resolved instead of this item.

        Pass-through ``REFERENCE_CONTENT`` translations keep their own address.
        """
        return self.reference_id > 0 and self.translate_content_type != TranslateContentType.REFERENCE_CONTENT

    @field_validator("link_url", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("translate_content_type", mode="before")
    @classmethod
    def _blank_translate_type(cls, value: Any) -> Any:
        return value or None


class ResolutionRequest(BaseModel):
    """A single "give me the URL of this entity" request."""

    model_config = ConfigDict(frozen=True)

    kind: EntityKind
    entity_id: int
    site_id: int
    mode: Mode = Mode.PUBLISHED
    channel_id: int | None = None
    """Owning channel of a content item, used to pick its content table."""
