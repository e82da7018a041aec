"""Map raw CRD records onto the normalized response schema."""

from __future__ import annotations

from ..models.response import (
    CollectionResult,
    ManualResult,
    ProfileResult,
    ProfileSystemInfo,
    ReferenceResult,
    SearchResult,
    SystemInfo,
)
from ..models.upstream import (
    RawCollection,
    RawManual,
    RawProfile,
    RawProfileSystemInfo,
    RawReference,
    RawResult,
    RawSystemInfo,
)


def map_system(raw: RawSystemInfo) -> SystemInfo:
    return SystemInfo(
        registered_at=raw.reg_date,
        updated_at=raw.lst_date,
        system_id=raw.sys_id,
        library_id=raw.lib_id,
        library_name=raw.lib_name,
        file_count=raw.file_num,
    )


def map_profile_system(raw: RawProfileSystemInfo) -> ProfileSystemInfo:
    return ProfileSystemInfo(
        registered_at=raw.reg_date,
        updated_at=raw.lst_date,
        library_id=raw.lib_id,
        library_name=raw.lib_name,
        file_count=raw.file_num,
    )


def map_reference(raw: RawReference) -> ReferenceResult:
    return ReferenceResult(
        url=raw.url,
        question=raw.question,
        registration_id=raw.reg_id,
        answer=raw.answer,
        created_at=raw.crt_date,
        # 0 means solved; absent or any other code is unsolved
        is_solution=raw.solution == 0,
        keywords=raw.keyword,
        classes=raw.classes,
        survey_type=raw.res_type,
        content_type=raw.con_type,
        bibls=raw.bibl,
        answer_process=raw.ans_proc,
        referrals=raw.referral,
        pre_survey=raw.pre_res,
        note=raw.note,
        questioner_type=raw.ptn_type,
        contributors=raw.contri,
        system=map_system(raw.system),
    )


def map_manual(raw: RawManual) -> ManualResult:
    return ManualResult(
        url=raw.url,
        theme=raw.theme,
        registration_id=raw.reg_id,
        guide=raw.guide,
        created_at=raw.crt_date,
        is_completed=raw.completion == 0,
        keywords=raw.keyword,
        classes=raw.classes,
        bibls=raw.bibl,
        note=raw.note,
        system=map_system(raw.system),
    )


def map_collection(raw: RawCollection) -> CollectionResult:
    return CollectionResult(
        url=raw.url,
        name=raw.col_name,
        name_kana=raw.pro_key,
        registration_id=raw.reg_id,
        content=raw.outline,
        origin=raw.origin,
        restriction=raw.restriction,
        catalog=raw.catalog,
        literature=raw.literature,
        number=raw.number,
        # string flag: "0" continued, "1" closed
        is_continued=raw.continue_ == "0",
        keywords=raw.keyword,
        classes=raw.classes,
        note=raw.note,
        system=map_system(raw.system),
    )


def map_profile(raw: RawProfile) -> ProfileResult:
    return ProfileResult(
        url=raw.url,
        library_type=raw.lib_type,
        library_name=raw.lib_name,
        library_name_kana=raw.pro_key,
        library_name_abbr=raw.abbr,
        zip_code=raw.zip_code,
        address_prefecture=raw.add_pref,
        address_city=raw.add_city,
        address_street=raw.add_street,
        tel1=raw.tel1,
        tel1_note=raw.tel1_note,
        tel2=raw.tel2,
        tel2_note=raw.tel2_note,
        tel3=raw.tel3,
        tel3_note=raw.tel3_note,
        fax=raw.fax,
        e_mail=raw.e_mail,
        homepage=raw.lib_url,
        open_info=raw.open_info,
        restriction=raw.restriction,
        outline=raw.outline,
        feature=raw.feature,
        notes=raw.notes,
        access=raw.access,
        isil=raw.isil,
        system=map_profile_system(raw.system),
    )


def map_result(raw: RawResult) -> SearchResult:
    """Convert one raw record into its normalized variant."""
    if raw.kind == "reference":
        return map_reference(raw)
    if raw.kind == "manual":
        return map_manual(raw)
    if raw.kind == "collection":
        return map_collection(raw)
    return map_profile(raw)


__all__ = [
    "map_result",
    "map_reference",
    "map_manual",
    "map_collection",
    "map_profile",
    "map_system",
    "map_profile_system",
]
