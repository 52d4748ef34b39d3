import argparse
import mimetypes
from pathlib import Path

import httpx


def main():
    parser = argparse.ArgumentParser(description="Post an image to a running LinguaLens server")
    parser.add_argument("image", type=Path, help="Path to an image containing English text")
    parser.add_argument("--url", default="http://localhost:8000/analyze")
    args = parser.parse_args()

    content_type = mimetypes.guess_type(args.image.name)[0] or "image/png"
    with open(args.image, "rb") as f:
        files = {"file": (args.image.name, f, content_type)}
        response = httpx.post(args.url, files=files, timeout=60.0)

    assert response.status_code == 200, f"Expected 200, got {response.status_code}"

    result = response.json()
    for i, record in enumerate(result["results"], start=1):
        print(f"{i}. {record['original']} -> {record['translated']}")

    assert result["count"] == len(result["results"])
    assert all("original" in r and "translated" in r for r in result["results"])

    print("\nAnalyze smoke test passed!")


if __name__ == "__main__":
    main()
