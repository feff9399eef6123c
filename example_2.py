from JsonToDDL import GenerationOptions, JsonNormalizer, SqlWriter, TableBuilder, get_dialect

# Load your JSON data
with open("example.json", "r") as f:
    json_data = JsonNormalizer.load(f.read())

root_table_name = "customer"
options = GenerationOptions(character_set="utf8mb4", collation="utf8mb4_unicode_ci", text_length=255)
dialect = get_dialect("mysql")

# Step 1: Generate CREATE TABLE statements from the JSON shape
ddl = TableBuilder(dialect, options).synthesize(json_data, None, root_table_name)

# Step 2: Generate INSERT statements from the JSON values
dml = SqlWriter(dialect, options).emit(json_data, None, root_table_name)

print(ddl)
print(dml)
