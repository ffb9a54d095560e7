from .tables import saturation_table, saturation_table_p
