from app.models.enums import GalleryCategory
from app.services.content_service import ContentService
from app.utils.validation import (
    parse_bool,
    parse_choice,
    parse_string,
    parse_url,
    require_fields,
)


class GalleryService(ContentService):
    repository_name = "gallery"
    required_fields = ("title", "imageUrl")

    def parse(self, data, partial=False):
        if not partial:
            require_fields(data, self.required_fields)

        attrs = {
            "title": parse_string(data, "title", min_length=1, max_length=255),
            "description": parse_string(data, "description"),
            "image_url": parse_url(data, "imageUrl"),
            "category": parse_choice(data, "category", GalleryCategory),
            "is_video": parse_bool(data, "isVideo"),
        }
        if partial:
            return {key: value for key, value in attrs.items() if value is not None}
        if attrs["category"] is None:
            attrs["category"] = GalleryCategory.RECENT
        if attrs["is_video"] is None:
            attrs["is_video"] = False
        return attrs

    def list_filters(self, args):
        return {"category": parse_choice(args, "category", GalleryCategory)}
