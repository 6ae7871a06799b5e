# ===============================
# 🔧 IMPORTS & SETUP
# ===============================
import argparse
import sys

from bible_processing.checkpoint import CheckpointStore
from bible_processing.config import BATCH_SIZE, CHECKPOINT_DIR, MAX_RETRIES
from bible_processing.pipeline import run_ingestion
from bible_processing.scrollmapper import ScrollMapperError


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Embed a ScrollMapper bible translation into Supabase, book by book.")
    parser.add_argument("version", nargs="?", help="translation to ingest, e.g. KJV")
    parser.add_argument("--batch-size", type=positive_int, default=str(BATCH_SIZE))
    parser.add_argument("--max-retries", type=positive_int, default=str(MAX_RETRIES))
    parser.add_argument("--checkpoint-dir", default=CHECKPOINT_DIR)
    return parser.parse_args(argv)


# ===============================
# 🎯 MAIN EXECUTION
# ===============================
def main(argv=None) -> int:
    args = parse_args(argv)
    version = args.version
    if version is None:
        version = input("Enter a valid bible version: ")
    version = (version or "").strip()
    if not version:
        print("❌ Please provide a valid bible version to scrape from ScrollMapper GitHub.")
        return 1

    print(f"\n🚀 Starting ingestion of {version}\n")
    try:
        report = run_ingestion(
            version,
            store=CheckpointStore(version, args.checkpoint_dir),
            batch_size=args.batch_size,
            max_retries=args.max_retries,
        )
    except ScrollMapperError as e:
        print(f"❌ {e}")
        return 1

    if not report.ok:
        print("\n⚠️ Some books need manual intervention; re-run to retry them.\n")
        return 1
    print("\n✅ All done! Ingestion complete.\n")
    return 0


# ===============================
# ▶️ ENTRY POINT
# ===============================
if __name__ == "__main__":
    sys.exit(main())
