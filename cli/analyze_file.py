# cli/analyze_file.py

import sys

from schema_analyzer.schema import Schema
from schema_analyzer.schema_infer import update_schema_with_document
from schema_analyzer.schema_query import SchemaPathNotFound, get_property_names_at_level
from schema_analyzer.serialization import DocumentParseError, dump_schema, load_documents


def analyze_file(path, level=None):
    with open(path, "rb") as f:
        docs = load_documents(f.read())

    schema = Schema()
    for doc in docs:
        update_schema_with_document(schema, doc)

    if level is None:
        return dump_schema(schema).decode("utf-8")

    segments = [segment for segment in level.split(".") if segment]
    return "\n".join(get_property_names_at_level(schema, segments))


def main(argv):
    if len(argv) < 2 or len(argv) > 3:
        print("usage: python cli/analyze_file.py path [path.to.level]")
        return 2

    try:
        print(analyze_file(argv[1], argv[2] if len(argv) == 3 else None))
    except DocumentParseError as e:
        print(f"could not parse {argv[1]}: {e}")
        return 1
    except SchemaPathNotFound as e:
        print(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
