"""
schemas.py
Around Post Dump — Output and source schema definitions.

Defines:
  - POST_DUMP_FIELDS: the warehouse table shape as ordered (name, type) pairs
  - POST_DUMP_SCHEMA: the same shape as a Spark StructType
  - SOURCE_COLUMNS: the Bigtable cells read for every post row
  - bigtable_catalog / catalog_table_ddl: derived connector catalog and DDL

The decoder in transforms/post_decoder.py produces fields in this order.
Change both together; there is no schema inference.
"""

import json

from pyspark.sql.types import StructType, StructField, StringType, DoubleType, BinaryType

# Warehouse view of the output record (BigQuery legacy type names)
POST_DUMP_FIELDS = (
    ("postId",  "STRING"),
    ("user",    "STRING"),
    ("message", "STRING"),
    ("lat",     "FLOAT"),
    ("lon",     "FLOAT"),
)

_SPARK_TYPES = {
    "STRING": StringType,
    "FLOAT":  DoubleType,  # BigQuery FLOAT is a 64-bit double
}

POST_DUMP_SCHEMA = StructType([
    StructField(name, _SPARK_TYPES[type_name](), nullable=True)
    for name, type_name in POST_DUMP_FIELDS
])

POST_DUMP_COLUMNS = tuple(name for name, _ in POST_DUMP_FIELDS)

# Row key column name in the connector DataFrame
ROW_KEY_COLUMN = "rowKey"

# Bigtable cells read per row: DataFrame column -> (column family, qualifier)
SOURCE_COLUMNS = {
    "post_user":    ("post",     "user"),
    "post_message": ("post",     "message"),
    "location_lat": ("location", "lat"),
    "location_lon": ("location", "lon"),
}

# Shape of the DataFrame the connector returns for bigtable_catalog()
SOURCE_ROW_SCHEMA = StructType(
    [StructField(ROW_KEY_COLUMN, BinaryType(), nullable=False)]
    + [StructField(column, BinaryType(), nullable=True) for column in SOURCE_COLUMNS]
)


def bigtable_catalog(table_id: str) -> str:
    """
    Spark Bigtable connector catalog for the post table.
    Every column is read as raw binary; decoding happens in the mapper.
    """
    columns = {ROW_KEY_COLUMN: {"cf": "rowkey", "col": "id", "type": "binary"}}
    for column, (family, qualifier) in SOURCE_COLUMNS.items():
        columns[column] = {"cf": family, "col": qualifier, "type": "binary"}
    return json.dumps({
        "table":   {"name": table_id},
        "rowkey":  "id",
        "columns": columns,
    })


def catalog_table_ddl(table: str, table_format: str) -> str:
    """CREATE TABLE IF NOT EXISTS statement for a Spark SQL catalog table."""
    columns = ",\n            ".join(
        f"`{field.name}` {field.dataType.simpleString().upper()}"
        for field in POST_DUMP_SCHEMA.fields
    )
    return f"""
        CREATE TABLE IF NOT EXISTS {table} (
            {columns}
        )
        USING {table_format}
    """
