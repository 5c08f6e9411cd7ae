from datetime import date

from app.services.content_service import ContentService
from app.utils.validation import parse_date, parse_string, parse_url, require_fields


class SermonService(ContentService):
    repository_name = "sermons"
    required_fields = ("title", "pastor")

    def parse(self, data, partial=False):
        if not partial:
            require_fields(data, self.required_fields)

        attrs = {
            "title": parse_string(data, "title", min_length=1, max_length=255),
            "description": parse_string(data, "description"),
            "pastor": parse_string(data, "pastor", min_length=1, max_length=255),
            "date": parse_date(data, "date"),
            "duration": parse_string(data, "duration", max_length=50),
            "audio_url": parse_url(data, "audioUrl"),
            "thumbnail_url": parse_url(data, "thumbnailUrl"),
        }
        if partial:
            return {key: value for key, value in attrs.items() if value is not None}
        if attrs["description"] is None:
            attrs["description"] = ""
        if attrs["date"] is None:
            attrs["date"] = date.today()
        return attrs
