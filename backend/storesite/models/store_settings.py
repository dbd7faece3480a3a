from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storesite.db.base import Base, TimestampMixin


class StoreSettings(TimestampMixin, Base):
    __tablename__ = "store_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_name: Mapped[str] = mapped_column(String(255), nullable=False)
    tagline: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    monday_hours: Mapped[str] = mapped_column(String(100), nullable=False)
    tuesday_hours: Mapped[str] = mapped_column(String(100), nullable=False)
    wednesday_hours: Mapped[str] = mapped_column(String(100), nullable=False)
    thursday_hours: Mapped[str] = mapped_column(String(100), nullable=False)
    friday_hours: Mapped[str] = mapped_column(String(100), nullable=False)
    saturday_hours: Mapped[str] = mapped_column(String(100), nullable=False)
    sunday_hours: Mapped[str] = mapped_column(String(100), nullable=False)

    about_title: Mapped[str] = mapped_column(String(255), nullable=False)
    about_description: Mapped[str] = mapped_column(Text, nullable=False)
    about_story: Mapped[str] = mapped_column(Text, nullable=False)
    founded_year: Mapped[str] = mapped_column(String(10), nullable=False)

    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    favicon_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    hero_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    about_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Hex colors (#rrggbb)
    primary_color: Mapped[str] = mapped_column(String(20), nullable=False)
    secondary_color: Mapped[str] = mapped_column(String(20), nullable=False)
    accent_color: Mapped[str] = mapped_column(String(20), nullable=False)
    font_family: Mapped[str] = mapped_column(String(100), nullable=False)

    facebook_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    instagram_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    x_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    google_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    yelp_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    seo_title: Mapped[str] = mapped_column(String(255), nullable=False)
    seo_description: Mapped[str] = mapped_column(Text, nullable=False)
    seo_keywords: Mapped[str] = mapped_column(Text, nullable=False)
