"""
Media Type
Content-Type header value with an optional charset
"""
from typing import Dict, Optional


class MediaType:
    """
    Parsed Content-Type value

    Example:
        media_type = MediaType.parse('text/html; charset=utf-8')
        media_type.media_type   # 'text/html'
        media_type.charset      # 'utf-8'
        str(MediaType('application/json'))  # 'application/json'
    """

    def __init__(self, media_type: str, charset: Optional[str] = None, parameters: Optional[Dict[str, str]] = None):
        if not media_type or '/' not in media_type:
            raise ValueError(f"Invalid media type: '{media_type}'")

        self.media_type = media_type.strip().lower()
        self.charset = charset
        self.parameters = dict(parameters or {})

    @classmethod
    def parse(cls, value: str) -> 'MediaType':
        media_type, *raw_params = value.split(';')
        charset = None
        parameters = {}

        for raw in raw_params:
            if '=' not in raw:
                continue
            key, _, param_value = raw.partition('=')
            key = key.strip().lower()
            param_value = param_value.strip().strip('"')
            if key == 'charset':
                charset = param_value
            else:
                parameters[key] = param_value

        return cls(media_type, charset, parameters)

    def with_charset(self, charset: str) -> 'MediaType':
        """Return a copy with charset replaced"""
        return MediaType(self.media_type, charset, self.parameters)

    def __str__(self) -> str:
        parts = [self.media_type]
        parts.extend(f'{key}={value}' for key, value in self.parameters.items())
        if self.charset:
            parts.append(f'charset={self.charset}')
        return '; '.join(parts)

    def __repr__(self) -> str:
        return f'MediaType({str(self)!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return (
            self.media_type == other.media_type
            and (self.charset or '').lower() == (other.charset or '').lower()
            and self.parameters == other.parameters
        )

    def __hash__(self) -> int:
        return hash((self.media_type, (self.charset or '').lower()))
