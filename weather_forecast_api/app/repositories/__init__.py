"""SQL access for each table, one repository class per entity."""
