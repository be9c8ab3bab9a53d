import json
import sys
from pathlib import Path

from astro_api.services.facts import derive_facts


def main() -> None:
    in_path = Path(sys.argv[1])
    out_path = Path(sys.argv[2])
    data = json.loads(in_path.read_text(encoding="utf-8"))
    facts = derive_facts(data.get("date"), data.get("time"))
    output = {**facts.to_payload(), "warnings": facts.warnings}
    out_path.write_text(json.dumps(output, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Wrote birth facts → {out_path}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python cli.py input.json output.json")
        sys.exit(1)
    main()
