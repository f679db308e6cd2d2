"""
Tuple Size Analysis for an Employees Table

Creates:
- employees table covering text, integer, boolean, date, numeric, jsonb,
  bytea and timestamp columns
- Five employees with different storage patterns

Then compares the theoretical tuple size of each row against the
statistics and storage sizes reported by PostgreSQL.
"""
import asyncio
import datetime
import json
import logging
from decimal import Decimal

from sqlalchemy import text

from pg_tuplesize import AsyncTupleStatsEngine, DatabaseSettings, TableConfig, analyze_tuple

TABLE = TableConfig(table_name="employees")

# Column comments note each type's alignment requirement
CREATE_TABLE = f"""
    CREATE TABLE {TABLE.qualified_name} (
        id BIGSERIAL PRIMARY KEY,
        name VARCHAR,            -- variable length, 4-byte aligned
        employee_id INTEGER,     -- 4 bytes, 4-byte aligned
        active BOOLEAN,          -- 1 byte, 1-byte aligned
        hire_date DATE,          -- 4 bytes, 4-byte aligned
        salary NUMERIC,          -- variable, estimated as 8 bytes
        details JSONB,           -- variable length, 4-byte aligned
        photo BYTEA,             -- variable length, 4-byte aligned
        created_at TIMESTAMP NOT NULL DEFAULT now(),
        updated_at TIMESTAMP NOT NULL DEFAULT now()
    )
"""

INSERT_EMPLOYEE = f"""
    INSERT INTO {TABLE.qualified_name}
    (name, employee_id, active, hire_date, salary, details, photo)
    VALUES (:name, :employee_id, :active, :hire_date, :salary, CAST(:details AS JSONB), :photo)
    RETURNING *
"""

TODAY = datetime.date.today()

EMPLOYEES = [
    (
        "MINIMAL EMPLOYEE (mostly nulls)",
        dict(name="John Doe", employee_id=1001, active=True, hire_date=None,
             salary=None, details=None, photo=None),
    ),
    (
        "TYPICAL EMPLOYEE (balanced)",
        dict(name="Jane Smith", employee_id=1002, active=True, hire_date=TODAY,
             salary=Decimal("75000.00"),
             details={"department": "Engineering", "title": "Senior Developer"},
             photo=None),
    ),
    (
        "DETAILED EMPLOYEE (large fields)",
        dict(name="Bob Wilson" + " " * 50, employee_id=1003, active=True, hire_date=TODAY,
             salary=Decimal("95000.50"),
             details={
                 "department": "Engineering",
                 "skills": ["Ruby", "PostgreSQL", "Rails", "JavaScript", "React"] * 10,
                 "projects": ["Project A", "Project B", "Project C"] * 5,
                 "certifications": ["AWS", "GCP", "Azure"] * 3,
                 "biography": "A" * 500,
             },
             photo=b"B" * 1000),
    ),
    (
        "COMPACT EMPLOYEE (small fields)",
        dict(name="Eva Chen", employee_id=1004, active=True, hire_date=TODAY,
             salary=Decimal("60000.00"), details={"department": "HR"}, photo=None),
    ),
    (
        "MIXED EMPLOYEE (varied sizes)",
        dict(name="Alex Kumar", employee_id=1005, active=False, hire_date=TODAY,
             salary=Decimal("82000.00"),
             details={
                 "department": "Marketing",
                 "skills": ["Content", "SEO", "Analytics"],
                 "notes": "B" * 200,
             },
             photo=b"C" * 500),
    ),
]


def print_tuple_analysis(label: str, row: dict):
    result = analyze_tuple(row)

    print(f"\n{'-' * 50}")
    print(label)
    print("-" * 50)
    print(f"\nAnalyzing tuple for Employee {row['name'].strip()}:")
    print(f"1. Header size: {result.header_size} bytes")
    print(f"2. Null bitmap size: {result.null_bitmap_size} bytes")
    print("\nColumn sizes:")
    for col in result.columns:
        null = " (NULL)" if col.is_null else ""
        kind = "variable" if col.is_variable_length else "fixed"
        print(f"- {col.name}: {col.size} bytes{null} ({kind})")
    print(f"\nTheoretical minimum size: {result.total_bytes} bytes")


async def main():
    logging.basicConfig(level=logging.INFO)

    # Reads POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_HOST, POSTGRES_PORT, POSTGRES_DB
    settings = DatabaseSettings()
    print(f"DATABASE: {settings.host}:{settings.port}/{settings.db}")
    engine = AsyncTupleStatsEngine.from_settings(settings)
    pool = engine._pool

    # Recreate table
    async with pool.connect() as conn:
        await conn.execute(text(f"DROP TABLE IF EXISTS {TABLE.qualified_name}"))
        await conn.execute(text(CREATE_TABLE))
        await conn.commit()

    # Insert employees and read them back as stored
    stored = []
    async with pool.connect() as conn:
        for label, employee in EMPLOYEES:
            params = dict(employee)
            if params["details"] is not None:
                params["details"] = json.dumps(params["details"])
            result = await conn.execute(text(INSERT_EMPLOYEE), params)
            stored.append((label, dict(result.mappings().one())))
        await conn.commit()
    print(f"Inserted {len(stored)} employees")

    for label, row in stored:
        print_tuple_analysis(label, row)

    # Refresh statistics before reading them
    await engine.analyze_table(TABLE.table_name, TABLE.schema_name)

    snapshot = await engine.snapshot(TABLE.table_name, TABLE.schema_name)

    print(f"\n{'-' * 50}")
    print("ACTUAL STORAGE ANALYSIS")
    print("-" * 50)
    print("\nStorage Sizes:")
    print(json.dumps(snapshot.sizes.model_dump(), indent=2))
    print("\nTable Statistics:")
    print(json.dumps(snapshot.stats.model_dump(), indent=2))

    print("\nKey Observations:")
    print("1. NULL values only consume space in the null bitmap")
    print("2. Variable-length fields have overhead for length")
    print("3. Alignment padding adds to theoretical size")
    print("4. TOAST may be used for large values (> 2KB)")
    print("5. Actual size includes page overhead and alignment")

    await engine.close()


if __name__ == "__main__":
    asyncio.run(main())
