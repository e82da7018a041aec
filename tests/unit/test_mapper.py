"""Unit tests for mapping raw CRD records to the normalized schema."""

from __future__ import annotations

import pytest

from crd_mcp.models import (
    CollectionResult,
    ManualResult,
    ProfileResult,
    ProfileSystemInfo,
    RawCollection,
    RawManual,
    RawProfile,
    RawProfileSystemInfo,
    RawReference,
    RawSystemInfo,
    ReferenceResult,
    SystemInfo,
)
from crd_mcp.services.mapper import map_result


@pytest.fixture
def system() -> RawSystemInfo:
    return RawSystemInfo(
        reg_date="20200101120000",
        lst_date="20210202130000",
        sys_id="1000001",
        lib_id="1110001",
        lib_name="北海道立図書館",
        file_num=2,
    )


def _reference(system: RawSystemInfo, solution=None) -> RawReference:
    return RawReference(
        url="https://crd.ndl.go.jp/ref/1",
        question="q",
        reg_id="R-1",
        answer="a",
        crt_date="20200101",
        solution=solution,
        res_type="文献紹介",
        con_type="郷土",
        ans_proc="process",
        pre_res="none",
        ptn_type="社会人",
        contri=["司書A"],
        keyword=["北海道"],
        system=system,
    )


@pytest.mark.parametrize(
    ("solution", "expected"),
    [(None, False), (1, False), (0, True), (2, False)],
)
def test_reference_is_solution(system: RawSystemInfo, solution, expected: bool) -> None:
    result = map_result(_reference(system, solution=solution))

    assert result.is_solution is expected


def test_reference_renames(system: RawSystemInfo) -> None:
    result = map_result(_reference(system, solution=0))

    assert isinstance(result, ReferenceResult)
    assert result.type == "reference"
    assert result.registration_id == "R-1"
    assert result.created_at == "20200101"
    assert result.survey_type == "文献紹介"
    assert result.content_type == "郷土"
    assert result.answer_process == "process"
    assert result.pre_survey == "none"
    assert result.questioner_type == "社会人"
    assert result.contributors == ["司書A"]
    assert result.keywords == ["北海道"]


def test_system_info_renames(system: RawSystemInfo) -> None:
    result = map_result(_reference(system))

    assert result.system == SystemInfo(
        registered_at="20200101120000",
        updated_at="20210202130000",
        system_id="1000001",
        library_id="1110001",
        library_name="北海道立図書館",
        file_count=2,
    )


@pytest.mark.parametrize(
    ("completion", "expected"),
    [(None, False), (1, False), (0, True)],
)
def test_manual_is_completed(system: RawSystemInfo, completion, expected: bool) -> None:
    raw = RawManual(
        url="u",
        theme="郷土資料の調べ方",
        reg_id="M-1",
        guide="guide text",
        crt_date="20190505",
        completion=completion,
        system=system,
    )

    result = map_result(raw)

    assert isinstance(result, ManualResult)
    assert result.is_completed is expected
    assert result.guide == "guide text"
    assert result.registration_id == "M-1"
    assert result.created_at == "20190505"


@pytest.mark.parametrize(
    ("flag", "expected"),
    [("0", True), ("1", False), (None, False), ("00", False)],
)
def test_collection_is_continued_compares_strings(
    system: RawSystemInfo, flag, expected: bool
) -> None:
    raw = RawCollection(
        url="u",
        col_name="松浦武四郎文庫",
        pro_key="マツウラタケシロウブンコ",
        reg_id="C-1",
        outline="旧蔵書",
        continue_=flag,
        system=system,
    )

    result = map_result(raw)

    assert isinstance(result, CollectionResult)
    assert result.is_continued is expected
    assert result.name == "松浦武四郎文庫"
    assert result.name_kana == "マツウラタケシロウブンコ"
    assert result.content == "旧蔵書"


def test_profile_renames_and_small_system() -> None:
    raw = RawProfile(
        url="u",
        lib_type="21",
        lib_name="長野県立長野図書館",
        abbr="県立長野",
        pro_key="ナガノケンリツナガノトショカン",
        zip_code="380-0928",
        add_pref="長野県",
        add_city="長野市",
        add_street="若里1-1-4",
        tel1="026-228-4500",
        lib_url="https://www.library.pref.nagano.jp/",
        system=RawProfileSystemInfo(
            reg_date="20190101000000",
            lst_date="20230101000000",
            lib_id="2200001",
            lib_name="長野県立長野図書館",
        ),
    )

    result = map_result(raw)

    assert isinstance(result, ProfileResult)
    assert result.library_type == "21"
    assert result.library_name == "長野県立長野図書館"
    assert result.library_name_kana == "ナガノケンリツナガノトショカン"
    assert result.library_name_abbr == "県立長野"
    assert result.address_prefecture == "長野県"
    assert result.address_city == "長野市"
    assert result.address_street == "若里1-1-4"
    assert result.homepage == "https://www.library.pref.nagano.jp/"
    assert type(result.system) is ProfileSystemInfo
    assert "system_id" not in result.system.model_dump()
    assert result.system.file_count == 0
