"""Message types for client-server communication."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mashumaro.mixins.msgpack import DataClassMessagePackMixin
from mashumaro.types import Discriminator


@dataclass
class Message(DataClassMessagePackMixin):
    """Base class for all messages."""

    def __repr__(self):
        fields = ", ".join(f"{key}={val!r}" for key, val in self.__dict__.items())
        return f"{self.__class__.__name__}({fields})"


@dataclass(repr=False)
class Request(Message):
    """A request from client to server.

    The server has no idea what it will be sent, so requests are not
    specialised: `command` is one of the `CONSTS` strings and `params`
    carries its arguments.
    """

    command: str
    params: dict[str, str | None] = field(default_factory=dict)


@dataclass(kw_only=True, repr=False)
class Response(Message):
    """A response from server to client's request."""

    type: str  # subclass to define
    value: Any  # subclass to define

    class Config:
        discriminator = Discriminator(field="type", include_subtypes=True)


@dataclass(kw_only=True, repr=False)
class MsgResponse(Response):
    type: str = "msg"
    value: str = ""


@dataclass(kw_only=True, repr=False)
class ErrorResponse(Response):
    type: str = "error"
    value: str = ""
