"""Pydantic schemas for public site information."""

import enum
import logging
import typing as t
from datetime import datetime, timezone

from pydantic import Field

from helping_hands.schemas.common import WireModel

LOGGER: logging.Logger = logging.getLogger(__name__)


class FieldState(str, enum.Enum):
    """How a field appeared in a partial update payload."""

    UNSET = "unset"
    NULL = "null"
    VALUE = "value"


class SiteInfoContent(WireModel):
    """Text blocks shown on the public site."""

    about_text: str | None = Field(None, alias="aboutText")
    programs_overview: str | None = Field(None, alias="programsOverview")
    hours_text: str | None = Field(None, alias="hoursText")
    location_text: str | None = Field(None, alias="locationText")
    contact_text: str | None = Field(None, alias="contactText")
    what_to_bring_text: str | None = Field(None, alias="whatToBringText")


class SiteInfoDto(SiteInfoContent):
    """Schema for site information response."""

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="updatedAt",
    )


class UpdateSiteInfoRequest(SiteInfoContent):
    """Schema for a partial update of site information.

    Only fields present in the payload with a string value are applied.
    A missing key and an explicit ``null`` both leave the stored text
    untouched, while ``""`` clears it.
    """

    def field_state(self, name: str) -> FieldState:
        """Report whether a field was omitted, null or given a value.

        Args:
            name (str): The Python field name, e.g. ``"hours_text"``.

        Returns:
            FieldState: The state of the field in the payload.
        """
        if name not in SiteInfoContent.model_fields:
            raise KeyError(name)
        if name not in self.model_fields_set:
            return FieldState.UNSET
        if getattr(self, name) is None:
            return FieldState.NULL
        return FieldState.VALUE

    def changes(self) -> t.Dict[str, str]:
        """Get the fields this request overwrites.

        Returns:
            t.Dict[str, str]: Field name to new text, ``""`` meaning clear.
        """
        return {
            name: getattr(self, name)
            for name in SiteInfoContent.model_fields
            if self.field_state(name) is FieldState.VALUE
        }

    def apply_to(self, site_info: SiteInfoDto) -> SiteInfoDto:
        """Apply this request as a patch over the current site information.

        Args:
            site_info (SiteInfoDto): The currently stored site information.

        Returns:
            SiteInfoDto: A new object with the changes applied. The input is
                returned unchanged (same object) when nothing was provided.
        """
        changes: t.Dict[str, str] = self.changes()
        if not changes:
            LOGGER.debug("Site info update carried no changes")
            return site_info

        update: t.Dict[str, t.Any] = {
            name: value or None for name, value in changes.items()
        }
        update["updated_at"] = datetime.now(timezone.utc)
        LOGGER.info(
            "Updating site info fields: %s", ", ".join(sorted(changes))
        )
        return site_info.model_copy(update=update)
