"""
Profile record as stored in the key-value store.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ProfileRecord:
    """
    Username/email pair fetched for a single lookup.
    """

    username: str
    email: str

    @classmethod
    def from_payload(cls, payload: Union[bytes, str]) -> "ProfileRecord":
        """
        Decode a UTF-8 JSON object into a record.

        Only ``username`` and ``email`` are read; any other key is dropped.
        Raises ValueError when the payload is not a JSON object holding both
        fields as strings.
        """
        if isinstance(payload, bytes):
            payload = payload.decode('utf-8')
        data = json.loads(payload)

        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        fields = {}
        for name in ('username', 'email'):
            value = data.get(name)
            if not isinstance(value, str):
                raise ValueError(f"field '{name}' must be a string")
            fields[name] = value

        return cls(**fields)

    def to_dict(self) -> dict:
        return {'username': self.username, 'email': self.email}
