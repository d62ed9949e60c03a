"""Pure helpers turning an OCR service response into receipt text."""

from typing import Any

MIN_DETECTION_CONFIDENCE = 0.5  # Drop detections the OCR engine is unsure about
MIN_ROW_OVERLAP = 0.5  # Vertical overlap needed to put two detections on one row


def _boxes_overlap_y(det1: dict, det2: dict, min_overlap_ratio: float = MIN_ROW_OVERLAP) -> bool:
    """
    Check if two boxes overlap in Y-axis by at least min_overlap_ratio.

    The ratio is taken against the smaller box so a tall price box still
    pairs with a short item label on the same row.
    """
    overlap_start = max(det1["y_min"], det2["y_min"])
    overlap_end = min(det1["y_max"], det2["y_max"])
    if overlap_start >= overlap_end:
        return False

    overlap = overlap_end - overlap_start
    smaller_height = min(det1["y_max"] - det1["y_min"], det2["y_max"] - det2["y_min"])

    # Avoid division by zero for degenerate boxes
    if smaller_height <= 0:
        return False

    return overlap / smaller_height >= min_overlap_ratio


def _line_y_span(line: list[dict]) -> dict:
    """Return the (y_min, y_max) span of a grouped line as a box-like dict."""
    return {
        "y_min": min(det["y_min"] for det in line),
        "y_max": max(det["y_max"] for det in line),
    }


def _detection_data(detections: list[Any]) -> list[dict]:
    """Flatten PaddleOCR detections, dropping low-confidence or blank text."""
    data = []
    for detection in detections:
        bbox, (text, confidence) = detection
        if confidence < MIN_DETECTION_CONFIDENCE or not str(text).strip():
            continue

        y_coords = [point[1] for point in bbox]
        data.append(
            {
                "text": str(text).strip(),
                "y_min": min(y_coords),
                "y_max": max(y_coords),
                "center_y": sum(y_coords) / len(y_coords),
                "min_x": min(point[0] for point in bbox),
            }
        )
    return data


def _group_detections_into_rows(detections: list[dict]) -> list[list[dict]]:
    """Group detections into text rows, top to bottom."""
    rows: list[list[dict]] = []
    for det in sorted(detections, key=lambda d: (d["center_y"], d["min_x"])):
        if rows and _boxes_overlap_y(det, _line_y_span(rows[-1])):
            rows[-1].append(det)
        else:
            rows.append([det])

    # Sort each row by X position (left to right)
    for row in rows:
        row.sort(key=lambda d: d["min_x"])
    return rows


def ocr_result_to_text(raw_result: dict[str, Any]) -> str:
    """
    Extract recognized text from an OCR service response.

    Accepts either a ready-made "full_text"/"text" field or PaddleOCR-style
    "detections" ([bbox, [text, confidence]]) which are grouped into rows.
    """
    for key in ("full_text", "text"):
        if isinstance(raw_result.get(key), str):
            return raw_result[key]

    detections = _detection_data(raw_result.get("detections", []))
    rows = _group_detections_into_rows(detections)
    return "\n".join(" ".join(det["text"] for det in row) for row in rows)
