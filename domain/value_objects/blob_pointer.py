from typing import ClassVar

from pydantic import BaseModel

from domain.exceptions import ValidationError


class StoredBlobPointer(BaseModel):
    """Value object for the pointer string persisted in an observation's value_complex.

    The wire format is ``"<filename> file |<filename>"``: a title segment and the
    stored filename separated by ``|``. Pointers written by earlier releases must
    keep parsing, so neither the format nor the title sanitization may change.
    """

    SEPARATOR: ClassVar[str] = "|"
    TITLE_SUFFIX: ClassVar[str] = " file "

    title: str
    """Raw title segment, as embedded in the pointer."""

    filename: str
    """Name of the stored file relative to the storage root."""

    model_config = {"frozen": True}

    @classmethod
    def for_filename(cls, filename: str) -> "StoredBlobPointer":
        """Build the pointer written for a freshly stored file."""
        return cls(title=f"{filename}{cls.TITLE_SUFFIX}", filename=filename)

    @classmethod
    def parse(cls, value: str) -> "StoredBlobPointer":
        """Parse a persisted pointer value.

        Trailing empty segments are ignored. The first segment is the title and the
        last one the filename; a value without a separator is used for both.
        """
        names = value.rstrip(cls.SEPARATOR).split(cls.SEPARATOR)
        filename = names[-1].strip()
        if not filename:
            msg = f"Complex data pointer has no filename: {value!r}"
            raise ValidationError(msg)
        return cls(title=names[0], filename=filename)

    @property
    def value(self) -> str:
        return f"{self.title}{self.SEPARATOR}{self.filename}"

    @property
    def display_title(self) -> str:
        """Title with commas and spaces removed and the trailing ``file`` token stripped."""
        # downloads break on blanks and commas in names
        title = self.title.replace(",", "").replace(" ", "")
        return title.removesuffix("file")
