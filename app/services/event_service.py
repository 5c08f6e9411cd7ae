from app.models.enums import EventCategory
from app.services.content_service import ContentService
from app.utils.validation import (
    parse_choice,
    parse_date,
    parse_string,
    require_fields,
)


class EventService(ContentService):
    repository_name = "events"
    required_fields = ("title", "date", "category")

    def parse(self, data, partial=False):
        if not partial:
            require_fields(data, self.required_fields)

        attrs = {
            "title": parse_string(data, "title", min_length=3, max_length=255),
            "description": parse_string(data, "description"),
            "date": parse_date(data, "date"),
            "time": parse_string(data, "time", max_length=50),
            "location": parse_string(data, "location", max_length=255),
            "category": parse_choice(data, "category", EventCategory),
        }
        if partial:
            return {key: value for key, value in attrs.items() if value is not None}
        if attrs["description"] is None:
            attrs["description"] = ""
        return attrs

    def list_filters(self, args):
        return {"category": parse_choice(args, "category", EventCategory)}
