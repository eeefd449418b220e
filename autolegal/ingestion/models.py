from dataclasses import dataclass

_DATA_URL_SCHEME = "data:"


def strip_data_url_prefix(value: str) -> str:
    """Return the base64 payload of a data URL, or the value unchanged."""
    if value.startswith(_DATA_URL_SCHEME) and "," in value:
        return value.split(",", 1)[1]
    return value


def _media_type_from_data_url(value: str) -> str:
    if not value.startswith(_DATA_URL_SCHEME) or "," not in value:
        return ""
    header = value[len(_DATA_URL_SCHEME):].split(",", 1)[0]
    return header.split(";", 1)[0]


@dataclass(frozen=True)
class EncodedFile:
    """A staged document ready to be sent to the model.

    ``content`` is the base64 encoding of the whole file without any
    ``data:<mime>;base64,`` header. ``name`` is for display only.
    """

    name: str
    content: str
    media_type: str = ""

    @classmethod
    def from_data_url(
        cls,
        name: str,
        data_url: str,
        media_type: str | None = None,
    ) -> "EncodedFile":
        """Build from a browser-style data URL, dropping the scheme header."""
        if media_type is None:
            media_type = _media_type_from_data_url(data_url)
        return cls(name=name, content=strip_data_url_prefix(data_url), media_type=media_type)

    @property
    def is_pdf(self) -> bool:
        return "pdf" in self.media_type

    @property
    def is_image(self) -> bool:
        return self.media_type.startswith("image/")
