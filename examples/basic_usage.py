"""
Basic usage example for Tasmee library.

This example demonstrates the core workflow:
1. Validate a reference ayah received from a Quran text source
2. Score a recited transcript against it
3. Follow a live recitation with interim transcripts
4. Output the result as JSON
"""

import json

from tasmee import Ayah, LiveMatcher, match_text, project_highlights


# Shape of one ayah as returned by alquran.cloud
AYAH_PAYLOAD = {
    "number": 1,
    "numberInSurah": 1,
    "text": "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "surah": {"number": 1, "name": "سُورَةُ ٱلْفَاتِحَةِ", "englishName": "Al-Faatiha"},
}


def score_recitation(ayah: Ayah, transcript: str) -> dict:
    """
    Score one transcript against an ayah.

    Args:
        ayah: Reference ayah
        transcript: What the reciter said, as transcribed

    Returns:
        Result as a JSON-serializable dict
    """
    print(f"\n📖 {ayah}: {ayah.text}")
    print(f"🎤 Heard: {transcript}")

    result = match_text(ayah.text, transcript)
    print(f"   Accuracy {result.accuracy}% • Jaccard {round(result.jaccard * 100)}%")

    for word in project_highlights(result):
        mark = "✅" if word.ok else "❌"
        print(f"   {mark} {word.word}")

    return {
        "sura_id": ayah.surah_id,
        "ayah_number": ayah.ayah_number,
        "transcribed_text": transcript,
        "accuracy": result.accuracy,
        "jaccard": round(result.jaccard, 3),
        "words": [w.model_dump() for w in project_highlights(result)],
    }


def follow_live(ayah: Ayah, partials: list[str]) -> None:
    """Feed growing interim transcripts to a LiveMatcher."""
    print("\n🔴 Live:")
    matcher = LiveMatcher(ayah.text)
    for partial in partials:
        result = matcher.update(partial)
        print(f"   {result.accuracy:3d}%  {partial}")
    print(f"   Best: {matcher.best_result.accuracy}%")


if __name__ == "__main__":
    ayah = Ayah.from_api_payload(AYAH_PAYLOAD)

    output = [
        score_recitation(ayah, "بسم الله الرحمن الرحيم"),
        score_recitation(ayah, "بسم الله الرحمان"),
    ]

    follow_live(ayah, ["بسم", "بسم الله", "بسم الله الرحمن", "بسم الله الرحمن الرحيم"])

    print("\n📄 JSON output:")
    print(json.dumps(output, ensure_ascii=False, indent=2))
