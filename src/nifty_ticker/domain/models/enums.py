"""Enumerations for domain models."""

from enum import Enum


class FailureKind(str, Enum):
    """Why a data source could not produce a quote."""

    TRANSPORT = "TRANSPORT"  # request error or non-success status
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    CACHE_READ = "CACHE_READ"  # local entry absent or undecodable


class QuoteOrigin(str, Enum):
    """Where an emitted quote came from."""

    LIVE = "LIVE"
    MOCK = "MOCK"
    CACHE = "CACHE"
    REMOTE_HISTORICAL = "REMOTE_HISTORICAL"
    DEFAULT = "DEFAULT"
