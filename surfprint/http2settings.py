"""HTTP/2 connection settings used to shape a client's HTTP/2 fingerprint."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

_UINT32_MAX = 0xFFFFFFFF


def _check_uint32(name: str, value: int) -> int:
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{name} must fit in an unsigned 32-bit integer, got {value}")
    return value


class SettingID(IntEnum):
    """Identifiers of HTTP/2 SETTINGS parameters."""

    HEADER_TABLE_SIZE = 0x1
    ENABLE_PUSH = 0x2
    MAX_CONCURRENT_STREAMS = 0x3
    INITIAL_WINDOW_SIZE = 0x4
    MAX_FRAME_SIZE = 0x5
    MAX_HEADER_LIST_SIZE = 0x6


@dataclass(frozen=True)
class Setting:
    """One SETTINGS parameter sent on connection start."""

    id: SettingID
    val: int

    def __post_init__(self) -> None:
        _check_uint32("setting value", self.val)


@dataclass(frozen=True)
class PriorityParam:
    """Stream priority: dependency, exclusivity flag and weight."""

    stream_dep: int = 0
    exclusive: bool = False
    weight: int = 0

    def __post_init__(self) -> None:
        _check_uint32("stream dependency", self.stream_dep)
        if not 0 <= self.weight <= 0xFF:
            raise ValueError(f"weight must fit in one byte, got {self.weight}")

    def is_zero(self) -> bool:
        """True when every field holds its zero value."""
        return self.stream_dep == 0 and not self.exclusive and self.weight == 0


@dataclass(frozen=True)
class PriorityFrame:
    """A PRIORITY frame sent for a given stream."""

    stream_id: int
    priority_param: PriorityParam = field(default_factory=PriorityParam)


@dataclass
class HTTP2TransportConfig:
    """The HTTP/2 transport parameters produced by :class:`HTTP2Settings`."""

    settings: list[Setting] = field(default_factory=list)
    connection_flow: int = 0
    priority_param: PriorityParam = field(default_factory=PriorityParam)
    priority_frames: Optional[list[PriorityFrame]] = None


class HTTP2Settings:
    """Fluent collector of HTTP/2 settings."""

    def __init__(self) -> None:
        self._header_table_size = 0
        self._enable_push = 0
        self._use_push = False
        self._max_concurrent_streams = 0
        self._initial_window_size = 0
        self._max_frame_size = 0
        self._max_header_list_size = 0
        self._connection_flow = 0
        self._priority_param = PriorityParam()
        self._priority_frames: Optional[list[PriorityFrame]] = None

    def header_table_size(self, size: int) -> HTTP2Settings:
        self._header_table_size = _check_uint32("header table size", size)
        return self

    def enable_push(self, size: int) -> HTTP2Settings:
        """Send the ENABLE_PUSH setting, even when its value is zero."""
        self._enable_push = _check_uint32("enable push", size)
        self._use_push = True
        return self

    def max_concurrent_streams(self, size: int) -> HTTP2Settings:
        self._max_concurrent_streams = _check_uint32("max concurrent streams", size)
        return self

    def initial_window_size(self, size: int) -> HTTP2Settings:
        self._initial_window_size = _check_uint32("initial window size", size)
        return self

    def max_frame_size(self, size: int) -> HTTP2Settings:
        self._max_frame_size = _check_uint32("max frame size", size)
        return self

    def max_header_list_size(self, size: int) -> HTTP2Settings:
        self._max_header_list_size = _check_uint32("max header list size", size)
        return self

    def connection_flow(self, size: int) -> HTTP2Settings:
        self._connection_flow = _check_uint32("connection flow", size)
        return self

    def priority_param(self, param: PriorityParam) -> HTTP2Settings:
        self._priority_param = param
        return self

    def priority_frames(self, frames: Optional[list[PriorityFrame]]) -> HTTP2Settings:
        self._priority_frames = None if frames is None else list(frames)
        return self

    def settings(self) -> list[Setting]:
        """The SETTINGS parameters to send, in identifier order, skipping unset ones."""
        values = (
            (SettingID.HEADER_TABLE_SIZE, self._header_table_size),
            (SettingID.ENABLE_PUSH, self._enable_push),
            (SettingID.MAX_CONCURRENT_STREAMS, self._max_concurrent_streams),
            (SettingID.INITIAL_WINDOW_SIZE, self._initial_window_size),
            (SettingID.MAX_FRAME_SIZE, self._max_frame_size),
            (SettingID.MAX_HEADER_LIST_SIZE, self._max_header_list_size),
        )
        return [
            Setting(setting_id, value)
            for setting_id, value in values
            if value != 0 or (setting_id is SettingID.ENABLE_PUSH and self._use_push)
        ]

    def build(self, force_http1: bool = False) -> Optional[HTTP2TransportConfig]:
        """Produce the transport configuration, or None when HTTP/1.1 is forced."""
        if force_http1:
            return None
        config = HTTP2TransportConfig(settings=self.settings())
        if self._connection_flow != 0:
            config.connection_flow = self._connection_flow
        if not self._priority_param.is_zero():
            config.priority_param = self._priority_param
        if self._priority_frames is not None:
            config.priority_frames = list(self._priority_frames)
        return config