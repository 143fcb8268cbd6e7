"""Tests for image URLs and tag numbers."""

import pytest
from hypothesis import given, strategies as st

from igdb import (
    BlankImageIDError,
    Cover,
    ImageSize,
    NegativeIDError,
    PixelRatioError,
    TagType,
    generate_tag,
    sized_image_url,
)


class TestImageURLs:
    """Test cases for sized image URLs."""

    def test_sized_url(self) -> None:
        url = sized_image_url("co1wyy", ImageSize.COVER_BIG)
        assert url == "https://images.igdb.com/igdb/image/upload/t_cover_big/co1wyy.jpg"

    def test_retina_url(self) -> None:
        url = sized_image_url("sc6lsb", ImageSize.FULL_HD, 2)
        assert url == "https://images.igdb.com/igdb/image/upload/t_1080p_2x/sc6lsb.jpg"

    @pytest.mark.parametrize("image_id", ["", "   "])
    def test_blank_id(self, image_id: str) -> None:
        with pytest.raises(BlankImageIDError):
            sized_image_url(image_id, ImageSize.THUMB)

    @pytest.mark.parametrize("ratio", [0, 3, -1])
    def test_invalid_ratio(self, ratio: int) -> None:
        with pytest.raises(PixelRatioError):
            sized_image_url("co1wyy", ImageSize.THUMB, ratio)

    def test_image_record_url(self) -> None:
        cover = Cover.from_dict({"id": 1, "image_id": "co1wyy"})
        assert cover.sized_url(ImageSize.MICRO) == "https://images.igdb.com/igdb/image/upload/t_micro/co1wyy.jpg"

    def test_image_record_without_id(self) -> None:
        with pytest.raises(BlankImageIDError):
            Cover.from_dict({"id": 1}).sized_url(ImageSize.MICRO)


class TestTags:
    """Test cases for generate_tag."""

    def test_known_tag(self) -> None:
        assert generate_tag(TagType.THEME, 1) == 1
        assert generate_tag(TagType.GENRE, 5) == 268435461

    @given(st.sampled_from(TagType), st.integers(min_value=0, max_value=2**28 - 1))
    def test_tag_packs_type_and_id(self, tag_type: TagType, object_id: int) -> None:
        """**Property: the type sits in the high bits and the ID in the low 28**"""
        tag = generate_tag(tag_type, object_id)
        assert tag >> 28 == tag_type
        assert tag & (2**28 - 1) == object_id

    def test_negative_id(self) -> None:
        with pytest.raises(NegativeIDError):
            generate_tag(TagType.GAME, -1)

    @pytest.mark.parametrize("object_id", [True, 2.0, "7"])
    def test_non_integer_id(self, object_id: object) -> None:
        with pytest.raises(NegativeIDError):
            generate_tag(TagType.GAME, object_id)  # type: ignore[arg-type]
