import json
from JsonToDDL import process_json_to_sql

# Load your JSON data
with open("example.json", "r") as f:
    json_data = json.load(f)

root_table_name = "customer"

# Basic Example: table definitions and inserts for every engine in one step
sql_script = process_json_to_sql(
    json_data, ["sqlite", "mysql", "postgres"], table_name=root_table_name, insert=True
)

print(sql_script)
