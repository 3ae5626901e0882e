"""Example usage of the record_config library."""

import json

from record_config import RecordParser, extract_records

# Define annotated records using the DSL
definitions = """
@default_instructions(Create, Update, Delete)
Person {
    @primary_key(autoincrement = false)
    id: u64,
    @authority
    owner: Pubkey,
    name: string,
    tags: u8[],
}

# Not subject to the schema: no primary key
Point {
    x: i32,
    y: i32,
}
"""

records = RecordParser().parse(definitions)

for extraction in extract_records(records):
    print(f"{extraction.record_name}: {extraction.outcome.value}")
    if extraction.config is not None:
        print(json.dumps(extraction.config.to_dict(), indent=2))
