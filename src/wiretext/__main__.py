import argparse
import json
from pathlib import Path

from .analyzer import analyze_file
from .exceptions import CaptureReadError
from .utils import export_to_csv, packets_to_dataframe, protocol_stats_to_dataframe, talkers_to_dataframe


def main(argv=None):
    parser = argparse.ArgumentParser(description="Capture text export analyzer")
    sub = parser.add_subparsers(dest="cmd", required=True)
    analyze_cmd = sub.add_parser("analyze", help="analyze a text export of a capture")
    analyze_cmd.add_argument("capture")
    analyze_cmd.add_argument("--csv", dest="csv_path", help="write packets to this CSV file")
    analyze_cmd.add_argument("--json", dest="json_path", help="write the summary to this JSON file")
    analyze_cmd.add_argument("--top", type=int, default=10, help="rows shown per table")
    args = parser.parse_args(argv)

    if args.cmd == "analyze":
        try:
            result = analyze_file(Path(args.capture))
        except CaptureReadError as exc:
            parser.exit(2, f"error: {exc}\n")

        print(
            f"Parsed {result.total_packets} packets ({result.total_bytes} bytes, "
            f"dialect {result.dialect}) from {result.start_time} to {result.end_time}"
        )
        print(f"Unique IPs: {result.unique_ips}")
        if result.protocol_stats:
            print(protocol_stats_to_dataframe(result).head(args.top).to_string(index=False))
        if result.top_talkers:
            print(talkers_to_dataframe(result).head(args.top).to_string(index=False))

        if args.csv_path:
            export_to_csv(packets_to_dataframe(result.packets), args.csv_path)
        if args.json_path:
            with open(args.json_path, "w", encoding="utf-8") as fh:
                json.dump(result.summary(), fh, indent=2, ensure_ascii=False)
    return 0


if __name__ == "__main__":
    main()
