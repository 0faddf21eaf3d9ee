"""Application ports."""

from cashkey.application.ports.state_codec_port import StateCodecPort

__all__ = ["StateCodecPort"]
