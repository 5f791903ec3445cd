from . import crud_category as category
from . import crud_item as item
from . import crud_dashboard as dashboard
