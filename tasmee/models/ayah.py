"""
Reference verse data models.

Verse text reaches the library from upstream Quran text sources as loosely
shaped JSON. These models validate it at the boundary so that matching code
only ever sees typed values.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from tasmee.exceptions import ReferenceDataError


class Surah(BaseModel):
    """
    Surah (chapter) metadata.

    Attributes:
        number: Surah number (1-114)
        name: Arabic name of the surah
        english_name: Transliterated name of the surah
    """

    number: int = Field(..., ge=1, le=114, description="Surah number (1-114)")
    name: str = Field(default="", description="Arabic name of the surah")
    english_name: str = Field(default="", description="Transliterated name")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"Surah {self.number} ({self.english_name or self.name})"


class Ayah(BaseModel):
    """
    A single verse used as the reference for recitation matching.

    Attributes:
        id: Global ayah number across the whole mushaf (1-6236)
        surah_id: Surah number (1-114)
        ayah_number: Ayah number within its surah
        text: Arabic text of the ayah, usually with full diacritics
    """

    id: int = Field(..., ge=1, le=6236, description="Global ayah number (1-6236)")
    surah_id: int = Field(..., ge=1, le=114, description="Surah number (1-114)")
    ayah_number: int = Field(..., ge=1, description="Ayah number within the surah")
    text: str = Field(..., min_length=1, description="Arabic text of the ayah")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "surah_id": 1,
                    "ayah_number": 1,
                    "text": "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ",
                }
            ]
        },
    }

    @classmethod
    def from_api_payload(
        cls,
        payload: Any,
        surah_id: Optional[int] = None,
    ) -> "Ayah":
        """
        Build an Ayah from an alquran.cloud style ayah object.

        The payload carries ``number``, ``numberInSurah`` and ``text``, and
        either a nested ``surah`` object or no surah at all (when the ayah
        came from a per-surah listing, pass ``surah_id``).

        Args:
            payload: Decoded JSON object for one ayah
            surah_id: Surah number to use when the payload has no ``surah``

        Returns:
            Validated Ayah

        Raises:
            ReferenceDataError: If the payload is not a valid ayah object
        """
        if not isinstance(payload, dict):
            raise ReferenceDataError(
                "Ayah payload must be an object",
                context={"type": type(payload).__name__},
            )

        surah = payload.get("surah")
        if surah_id is None and isinstance(surah, dict):
            surah_id = surah.get("number")
        if surah_id is None:
            raise ReferenceDataError("Ayah payload has no surah number", field="surah")

        try:
            return cls(
                id=payload.get("number"),
                surah_id=surah_id,
                ayah_number=payload.get("numberInSurah"),
                text=payload.get("text"),
            )
        except ValidationError as e:
            field = str(e.errors()[0]["loc"][0])
            raise ReferenceDataError(f"Invalid ayah payload: {field}", field=field) from e

    def __str__(self) -> str:
        return f"Ayah({self.surah_id}:{self.ayah_number})"


def surah_from_api_payload(payload: Any) -> Surah:
    """
    Build a Surah from an alquran.cloud style surah object.

    Raises:
        ReferenceDataError: If the payload is not a valid surah object
    """
    if not isinstance(payload, dict):
        raise ReferenceDataError(
            "Surah payload must be an object",
            context={"type": type(payload).__name__},
        )
    try:
        return Surah(
            number=payload.get("number"),
            name=payload.get("name") or "",
            english_name=payload.get("englishName") or "",
        )
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        raise ReferenceDataError(f"Invalid surah payload: {field}", field=field) from e
