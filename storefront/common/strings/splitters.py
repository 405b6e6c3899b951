from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [str(s).strip() for s in v if s and str(s).strip()]
    text = str(v).strip()
    # pydantic-settings hands complex env values over as JSON text
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1].replace('"', "").replace("'", "")
    return [s.strip() for s in text.split(",") if s.strip()]
