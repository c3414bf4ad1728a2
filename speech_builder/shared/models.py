"""
Option bag and result models used by the speech builder.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SayAsOptions(BaseModel):
    """Options for a say-as tag with interpret-as and format attributes."""

    model_config = ConfigDict(extra="ignore")

    word: Any = Field(None, description="Text to insert")
    interpret: str | None = Field(None, description="Value of the interpret-as attribute")
    format: str | None = Field(None, description="Value of the format attribute (e.g., 'mdy', 'hms24')")


class PartOfSpeechOptions(BaseModel):
    """Options for a w tag that sets the part of speech of a word."""

    model_config = ConfigDict(extra="ignore")

    word: Any = Field(None, description="Text to insert")
    role: str | None = Field(None, description="Part of speech role (e.g., 'amazon:VB')")


class ProsodyAttributes(BaseModel):
    """Rate, pitch and volume for a prosody tag."""

    model_config = ConfigDict(extra="ignore")

    rate: str | None = Field(None, description="Named rate or a percentage of at least 20%")
    pitch: str | None = Field(None, description="Named pitch or a signed percentage")
    volume: str | None = Field(None, description="Named volume or a signed decibel change")


class SpeechObject(BaseModel):
    """Result record handed to the response-delivery layer."""

    type: Literal["SSML"] = Field(default="SSML", description="Output speech type")
    speech: str = Field(..., description="Serialized SSML wrapped in a speak tag")
