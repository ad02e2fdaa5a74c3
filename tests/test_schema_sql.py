from fuego_admin.schema_sql import SCHEMA_TABLES, generate_schema_script


def test_output_is_byte_identical_across_calls():
    assert generate_schema_script().encode() == generate_schema_script().encode()


def test_drops_and_recreates_every_table():
    script = generate_schema_script()

    for table in SCHEMA_TABLES:
        assert f"DROP TABLE IF EXISTS {table};" in script
        assert f"create table {table} (" in script
        assert f"alter table {table} enable row level security;" in script
        assert f'create policy "Public Access" on {table} for all using (true) with check (true);' in script


def test_uuid_keys_and_utc_timestamps_on_two_tables():
    script = generate_schema_script()

    assert script.count("id uuid default gen_random_uuid() primary key") == 2
    assert script.count("default timezone('utc'::text, now()) not null") == 2
    assert "id text primary key" in script


def test_drops_come_before_creates():
    script = generate_schema_script()

    last_drop = max(script.index(f"DROP TABLE IF EXISTS {t};") for t in SCHEMA_TABLES)
    first_create = min(script.index(f"create table {t} (") for t in SCHEMA_TABLES)
    assert last_drop < first_create
