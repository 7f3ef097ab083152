from datetime import datetime, timedelta, timezone

import pytest

from immichgo.filenames import (
    InfoCollector,
    Kind,
    NameInfo,
    take_time_from_name,
    take_time_from_path,
)
from immichgo.filetypes import DEFAULT_SUPPORTED_MEDIA, TYPE_IMAGE

UTC = timezone.utc


def local(*args):
    return datetime(*args).astimezone()


def utc(*args):
    return datetime(*args, tzinfo=UTC)


def unix_milli(ms):
    return datetime(1970, 1, 1, tzinfo=UTC) + timedelta(milliseconds=ms)


local_ic = InfoCollector(tz=None, sm=DEFAULT_SUPPORTED_MEDIA)
utc_ic = InfoCollector(tz=UTC, sm=DEFAULT_SUPPORTED_MEDIA)


@pytest.mark.parametrize(
    "filename,expected",
    [
        (
            "IMG_20231014_183246_BURST001_COVER.jpg",
            NameInfo(
                radical="IMG_20231014_183246",
                base="IMG_20231014_183246_BURST001_COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=1,
                taken=local(2023, 10, 14, 18, 32, 46),
            ),
        ),
        (
            "IMG_20231014_183246_BURST002.jpg",
            NameInfo(
                radical="IMG_20231014_183246",
                base="IMG_20231014_183246_BURST002.jpg",
                is_cover=False,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=2,
                taken=local(2023, 10, 14, 18, 32, 46),
            ),
        ),
        ("IMG_1123.jpg", None),
    ],
)
def test_huawei(filename, expected):
    assert local_ic.huawei(filename) == expected


@pytest.mark.parametrize(
    "filename,expected",
    [
        (
            "00001IMG_00001_BURST20171111030039.jpg",
            NameInfo(
                radical="BURST20171111030039",
                base="00001IMG_00001_BURST20171111030039.jpg",
                is_cover=False,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=1,
                taken=local(2017, 11, 11, 3, 0, 39),
            ),
        ),
        (
            "00015IMG_00015_BURST20171111030039_COVER.jpg",
            NameInfo(
                radical="BURST20171111030039",
                base="00015IMG_00015_BURST20171111030039_COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=15,
                taken=local(2017, 11, 11, 3, 0, 39),
            ),
        ),
        (
            "00100lPORTRAIT_00100_BURST20181229213517346_COVER.jpg",
            NameInfo(
                radical="BURST20181229213517346",
                base="00100lPORTRAIT_00100_BURST20181229213517346_COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=100,
                taken=local(2018, 12, 29, 21, 35, 17, 346000),
            ),
        ),
        (
            "00000PORTRAIT_00000_BURST20190828181853475.jpg",
            NameInfo(
                radical="BURST20190828181853475",
                base="00000PORTRAIT_00000_BURST20190828181853475.jpg",
                is_cover=False,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=0,
                taken=local(2019, 8, 28, 18, 18, 53, 475000),
            ),
        ),
        (
            "00002IMG_00002_BURST1723801037429.jpg",
            NameInfo(
                radical="BURST1723801037429",
                base="00002IMG_00002_BURST1723801037429.jpg",
                is_cover=False,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=2,
                taken=unix_milli(1723801037429),
            ),
        ),
        ("IMG_1123.jpg", None),
    ],
)
def test_nexus(filename, expected):
    assert local_ic.nexus(filename) == expected


@pytest.mark.parametrize(
    "filename,expected",
    [
        (
            "PXL_20231026_210642603.dng",
            NameInfo(
                radical="PXL_20231026_210642603",
                base="PXL_20231026_210642603.dng",
                ext=".dng",
                type=TYPE_IMAGE,
                taken=utc(2023, 10, 26, 21, 6, 42),
            ),
        ),
        (
            "PXL_20231207_032111247.RAW-02.ORIGINAL.dng",
            NameInfo(
                radical="PXL_20231207_032111247",
                base="PXL_20231207_032111247.RAW-02.ORIGINAL.dng",
                ext=".dng",
                type=TYPE_IMAGE,
                index=2,
                taken=utc(2023, 12, 7, 3, 21, 11),
            ),
        ),
        (
            "PXL_20231207_032111247.RAW-01.COVER.jpg",
            NameInfo(
                radical="PXL_20231207_032111247",
                base="PXL_20231207_032111247.RAW-01.COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                index=1,
                taken=utc(2023, 12, 7, 3, 21, 11),
            ),
        ),
        (
            "PXL_20230330_184138390.MOTION-01.COVER.jpg",
            NameInfo(
                radical="PXL_20230330_184138390",
                base="PXL_20230330_184138390.MOTION-01.COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.MOTION,
                index=1,
                taken=utc(2023, 3, 30, 18, 41, 38),
            ),
        ),
        (
            "PXL_20230809_203029471.LONG_EXPOSURE-01.COVER.jpg",
            NameInfo(
                radical="PXL_20230809_203029471",
                base="PXL_20230809_203029471.LONG_EXPOSURE-01.COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.LONG_EXPOSURE,
                index=1,
                taken=utc(2023, 8, 9, 20, 30, 29),
            ),
        ),
        (
            "PXL_20240615_204528165.NIGHT.RAW-02.ORIGINAL.dng",
            NameInfo(
                radical="PXL_20240615_204528165",
                base="PXL_20240615_204528165.NIGHT.RAW-02.ORIGINAL.dng",
                ext=".dng",
                type=TYPE_IMAGE,
                kind=Kind.NIGHT,
                index=2,
                taken=utc(2024, 6, 15, 20, 45, 28),
            ),
        ),
        (
            "PXL_20240615_204528165.NIGHT.RAW-01.COVER.jpg",
            NameInfo(
                radical="PXL_20240615_204528165",
                base="PXL_20240615_204528165.NIGHT.RAW-01.COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.NIGHT,
                index=1,
                taken=utc(2024, 6, 15, 20, 45, 28),
            ),
        ),
        ("IMG_1123.jpg", None),
    ],
)
def test_pixel(filename, expected):
    assert utc_ic.pixel(filename) == expected


@pytest.mark.parametrize(
    "filename,expected",
    [
        (
            "20231207_101605_001.jpg",
            NameInfo(
                radical="20231207_101605",
                base="20231207_101605_001.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=1,
                taken=local(2023, 12, 7, 10, 16, 5),
            ),
        ),
        (
            "20231207_101605_031.jpg",
            NameInfo(
                radical="20231207_101605",
                base="20231207_101605_031.jpg",
                is_cover=False,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=31,
                taken=local(2023, 12, 7, 10, 16, 5),
            ),
        ),
        ("IMG_1123.jpg", None),
    ],
)
def test_samsung(filename, expected):
    assert local_ic.samsung(filename) == expected


@pytest.mark.parametrize(
    "filename,expected",
    [
        (
            "DSC_0001_BURST20230709220904977.JPG",
            NameInfo(
                radical="BURST20230709220904977",
                base="DSC_0001_BURST20230709220904977.JPG",
                is_cover=False,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=1,
                taken=local(2023, 7, 9, 22, 9, 4, 977000),
            ),
        ),
        (
            "DSC_0052_BURST20230709220904977_COVER.JPG",
            NameInfo(
                radical="BURST20230709220904977",
                base="DSC_0052_BURST20230709220904977_COVER.JPG",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=52,
                taken=local(2023, 7, 9, 22, 9, 4, 977000),
            ),
        ),
        ("IMG_1123.jpg", None),
    ],
)
def test_sony_xperia(filename, expected):
    assert local_ic.sony_xperia(filename) == expected


@pytest.mark.parametrize(
    "filename,expected",
    [
        (
            "PXL_20231026_210642603.dng",
            NameInfo(
                radical="PXL_20231026_210642603",
                base="PXL_20231026_210642603.dng",
                ext=".dng",
                type=TYPE_IMAGE,
                taken=utc(2023, 10, 26, 21, 6, 42),
            ),
        ),
        (
            "00015IMG_00015_BURST20171111030039_COVER.jpg",
            NameInfo(
                radical="BURST20171111030039",
                base="00015IMG_00015_BURST20171111030039_COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=15,
                taken=local(2017, 11, 11, 3, 0, 39),
            ),
        ),
        (
            "20231207_101605_031.jpg",
            NameInfo(
                radical="20231207_101605",
                base="20231207_101605_031.jpg",
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=31,
                taken=local(2023, 12, 7, 10, 16, 5),
            ),
        ),
        (
            "IMG_20171111_030128.jpg",
            NameInfo(
                radical="IMG_20171111_030128",
                base="IMG_20171111_030128.jpg",
                ext=".jpg",
                type=TYPE_IMAGE,
                taken=local(2017, 11, 11, 3, 1, 28),
            ),
        ),
        (
            "DSC_0001_BURST20230709220904977.JPG",
            NameInfo(
                radical="BURST20230709220904977",
                base="DSC_0001_BURST20230709220904977.JPG",
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=1,
                taken=local(2023, 7, 9, 22, 9, 4, 977000),
            ),
        ),
        (
            "00001IMG_00001_BURST1723801037429_COVER.jpg",
            NameInfo(
                radical="BURST1723801037429",
                base="00001IMG_00001_BURST1723801037429_COVER.jpg",
                is_cover=True,
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=1,
                taken=unix_milli(1723801037429),
            ),
        ),
        (
            "00002IMG_00002_BURST1723801037429.jpg",
            NameInfo(
                radical="BURST1723801037429",
                base="00002IMG_00002_BURST1723801037429.jpg",
                ext=".jpg",
                type=TYPE_IMAGE,
                kind=Kind.BURST,
                index=2,
                taken=unix_milli(1723801037429),
            ),
        ),
        (
            "IMG_1123.jpg",
            NameInfo(
                base="IMG_1123.jpg",
                radical="IMG_1123",
                ext=".jpg",
                type=TYPE_IMAGE,
            ),
        ),
    ],
)
def test_get_info(filename, expected):
    assert local_ic.get_info(filename) == expected


def test_get_info_uses_base_name():
    info = local_ic.get_info("some/folder/20231207_101605_031.jpg")
    assert info.base == "20231207_101605_031.jpg"
    assert info.index == 31


@pytest.mark.parametrize(
    "name,expected",
    [
        ("2024.png", None),
        ("2024-05.png", None),
        ("A/B/2022/2022.11/2022.11.09/IMG_1234.HEIC", utc(2022, 11, 9)),
        ("A/B/2022/2022.11/IMG_1234.HEIC", None),
        ("A/B/2022.11.09/2022.11/2022/IMG_1234.HEIC", utc(2022, 11, 9)),
        ("2024-05-05.png", utc(2024, 5, 5)),
        ("PXL_20220909_154515546.TS.mp4", utc(2022, 9, 9, 15, 45, 15)),
        ("Screenshot from 2022-12-17 19-45-43.png", utc(2022, 12, 17, 19, 45, 43)),
        ("Bebop2_20180719194940+0200.mp4", utc(2018, 7, 19, 19, 49, 40)),
        ("AR_EFFECT_20141126193511.mp4", utc(2014, 11, 26, 19, 35, 11)),
        ("2023-07-20 14:15:30", utc(2023, 7, 20, 14, 15, 30)),
        ("20001010120000", utc(2000, 10, 10, 12, 0, 0)),
        ("2023_07_20_10_09_20.mp4", utc(2023, 7, 20, 10, 9, 20)),
        ("19991231", utc(1999, 12, 31)),
        ("991231-125200", None),
        ("20223112-125200", None),
        ("00015IMG_00015_BURST20171111030039_COVER.jpg", utc(2017, 11, 11, 3, 0, 39)),
        ("IMG_1234.HEIC", None),
        ("20221109/IMG_1234.HEIC", utc(2022, 11, 9)),
        ("20221109T2030/IMG_1234.HEIC", utc(2022, 11, 9, 20, 30, 0)),
        ("2022.11.09T20.30/IMG_1234.HEIC", utc(2022, 11, 9, 20, 30, 0)),
        ("2022/11/09/IMG_1234.HEIC", utc(2022, 11, 9)),
        ("something_2011-05-11 something/IMG_1234.JPG", utc(2011, 5, 11)),
    ],
)
def test_take_time_from_path(name, expected):
    assert take_time_from_path(name, UTC) == expected


def test_take_time_from_name_rejects_far_future():
    future = datetime.now(UTC) + timedelta(days=400)
    if future.year > 2099:
        future = datetime(2099, 12, 31, tzinfo=UTC)
    name = future.strftime("%Y%m%d")
    expected = None if future - datetime.now(UTC) > timedelta(hours=24) else future
    assert take_time_from_name(name, UTC) is expected
    assert take_time_from_name("19991231", UTC) == utc(1999, 12, 31)