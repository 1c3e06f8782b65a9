from sqlalchemy import column, select, table

MAIN_FLOOR_FIRST_TABLE = 1
MAIN_FLOOR_LAST_TABLE = 11

# "Table" is a reserved word, so the dialect quotes it (`Table` on MySQL)
reservation_table = table(
    "Table",
    column("table_id"),
    column("seats"),
    column("is_reserved"),
)

MAIN_FLOOR_TABLES_QUERY = (
    select(
        reservation_table.c.table_id,
        reservation_table.c.seats,
        reservation_table.c.is_reserved,
    )
    .where(reservation_table.c.table_id.between(MAIN_FLOOR_FIRST_TABLE, MAIN_FLOOR_LAST_TABLE))
    .order_by(reservation_table.c.table_id)
)
