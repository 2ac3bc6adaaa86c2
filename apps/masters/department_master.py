"""
apps/masters/department_master.py

Department master: the organisation's departments, their heads, review
period and head count.
"""

from common import data_access
from common.master_page import Field, MasterPage

REVIEW_PERIODS = ["Q", "H", "Y"]


class Page(MasterPage):
    title = "Department Master"
    entity = "department"
    state_key = "departments"
    id_prefix = "dept"
    search_fields = ("name", "code", "description", "head_name", "location")
    table_columns = ["code", "name", "head_name", "location", "review_period", "employee_count", "is_active"]
    chart_field = "employee_count"
    fields = [
        Field("name", "Department Name", required=True),
        Field("code", "Code", required=True, help="Short unique code, e.g. ENG"),
        Field("head_name", "Department Head"),
        Field("location", "Location"),
        Field("review_period", "Review Period", kind="select", options=REVIEW_PERIODS,
              help="Q = quarterly, H = half-yearly, Y = yearly"),
        Field("budget_code", "Budget Code"),
        Field("description", "Description", kind="textarea"),
    ]

    def load_records(self):
        return data_access.get_departments()


def render_page(user: dict, **options) -> (callable, dict):
    """
    This is the public function that main_app.py interacts with.
    """
    page = Page(user=user, **options)
    return page.render_body, page.meta
