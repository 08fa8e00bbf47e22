"""ReelSwipe: video feed aggregation over third-party content APIs."""

__version__ = "2.0.0"

APP_NAME = "ReelSwipe v2"
