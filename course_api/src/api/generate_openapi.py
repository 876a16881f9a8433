import json
import os
import sys

from src.api.main import app


def main(output_dir: str = "interfaces") -> str:
    """Write the OpenAPI schema (all REST routes live under the API prefix) and return its path."""
    openapi_schema = app.openapi()

    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, "openapi.json")

    with open(output_path, "w") as f:
        json.dump(openapi_schema, f, indent=2)
    return output_path


if __name__ == "__main__":
    print(main(*sys.argv[1:2]))
