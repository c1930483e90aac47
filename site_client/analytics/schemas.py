"""Analytics API schemas."""

from pydantic import BaseModel, Field


class AnalyticsData(BaseModel):
    """Visitor counters as (name, count) pairs."""

    page_visits: list[tuple[str, int]] = Field(alias="pageVisits", default=[])
    section_views: list[tuple[str, int]] = Field(alias="sectionViews", default=[])
    element_clicks: list[tuple[str, int]] = Field(alias="elementClicks", default=[])
    daily_visitors: list[tuple[str, int]] = Field(alias="dailyVisitors", default=[])

    class Config:
        populate_by_name = True


class VisitorAck(BaseModel):
    """Backend acknowledgment of a unique visit: assigned day bucket and its count."""

    day_key: str = Field(alias="dayKey")
    count: int

    class Config:
        populate_by_name = True
