import argparse
import json
import logging
import sys

from swiftmt.exporter import Exporter
from swiftmt.parser import MT103Parser
from swiftmt.samples import get_sample_message
from swiftmt.database.repository import MessageRepository

logger = logging.getLogger(__name__)

def _read_message(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()

def handle_parse(args):
    """Handles the 'parse' subcommand: Outputs the JSON parse result of a message."""
    try:
        raw_data = _read_message(args.file)
        result = MT103Parser(raw_data).parse()
        print(Exporter.to_json(result, pretty=not args.compact))

    except Exception as e:
        print(f"Error parsing file: {e}", file=sys.stderr)
        sys.exit(1)

def handle_validate(args):
    """Handles the 'validate' subcommand: Reports every field and completeness error."""
    try:
        raw_data = _read_message(args.file)
        result = MT103Parser(raw_data).parse()

    except Exception as e:
        print(f"Error validating file: {e}", file=sys.stderr)
        sys.exit(1)

    if not result.valid:
        print("❌ Validation Failed:")
        for err in result.errors:
            print(f"  - {err}")
        sys.exit(1)

    print("✅ Validation Successful: Message is a valid MT103.")

def handle_sample(args):
    """Handles the 'sample' subcommand: Prints a valid MT103 message."""
    print(get_sample_message())

def handle_schema(args):
    """Handles the 'schema' subcommand: Exports the OpenAPI description of the result models."""
    try:
        if args.output:
            if args.format == "yaml":
                Exporter.export_yaml(args.output)
            else:
                Exporter.export_json(args.output)
            print(f"Exported OpenAPI {args.format.upper()} to {args.output}")
        elif args.format == "yaml":
            print(Exporter.to_yaml())
        else:
            print(json.dumps(Exporter.to_openapi(), indent=2))

    except Exception as e:
        print(f"Error exporting schema: {e}", file=sys.stderr)
        sys.exit(1)

def handle_persist(args):
    """Handles the 'persist' subcommand: Saves the parse result to a database."""
    try:
        from sqlalchemy import create_engine
        from sqlalchemy.orm import sessionmaker

        raw_data = _read_message(args.file)
        result = MT103Parser(raw_data).parse()

        engine = create_engine(args.db_url)
        MessageRepository.create_schema(engine)
        Session = sessionmaker(bind=engine)

        with Session() as session:
            repo = MessageRepository(session)
            record = repo.save(result, raw_payload_size=len(raw_data))
            session.commit()
            logger.debug("Stored record id=%s valid=%s", record.id, record.valid)
            print(f"✅ Successfully persisted message (ID: {record.id}, reference: {record.reference}) to database.")

    except Exception as e:
        print(f"Error persisting message: {e}", file=sys.stderr)
        sys.exit(1)

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="swiftmt",
        description="swiftmt CLI - Parse and validate SWIFT MT103 customer credit transfers."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Subcommand: parse
    parse_parser = subparsers.add_parser("parse", help="Parse a file and output the JSON result.")
    parse_parser.add_argument("file", help="Path to the SWIFT MT103 file.")
    parse_parser.add_argument("--compact", action="store_true", help="Print JSON on a single line.")
    parse_parser.set_defaults(func=handle_parse)

    # Subcommand: validate
    validate_parser = subparsers.add_parser("validate", help="Validate a file and list its errors.")
    validate_parser.add_argument("file", help="Path to the file to validate.")
    validate_parser.set_defaults(func=handle_validate)

    # Subcommand: sample
    sample_parser = subparsers.add_parser("sample", help="Print a sample MT103 message.")
    sample_parser.set_defaults(func=handle_sample)

    # Subcommand: schema
    schema_parser = subparsers.add_parser("schema", help="Export the OpenAPI schema of the parse result models.")
    schema_parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Export format (default: json)")
    schema_parser.add_argument("--output", help="Output file path (default: stdout)")
    schema_parser.set_defaults(func=handle_schema)

    # Subcommand: persist
    persist_parser = subparsers.add_parser("persist", help="Parse and save a file to a database.")
    persist_parser.add_argument("file", help="Path to the file to persist.")
    persist_parser.add_argument("--db-url", required=True, help="SQLAlchemy database URL (e.g. sqlite:///test.db).")
    persist_parser.set_defaults(func=handle_persist)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)

if __name__ == "__main__":
    main()
