"""Raw records decoded from the CRD XML response.

Field names mirror the upstream element names (hyphens become underscores).
Renaming into the public schema happens in ``services.mapper``.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Raw(BaseModel):
    model_config = ConfigDict(frozen=True)


class NdcClass(_Raw):
    """Classification code attached to a record."""

    type: str
    code: Optional[str] = None
    value: Optional[str] = None


class Bibl(_Raw):
    """Reference material entry."""

    desc: Optional[str] = None
    isbn: Optional[str] = None
    note: Optional[str] = None


class RawProfileSystemInfo(_Raw):
    reg_date: str
    lst_date: str
    lib_id: str
    lib_name: str
    file_num: int = 0


class RawSystemInfo(RawProfileSystemInfo):
    sys_id: str


class ErrorEntry(_Raw):
    """Upstream rejection of a request parameter."""

    err_code: str
    err_fld: str
    err_msg: str


class RawReference(_Raw):
    kind: Literal["reference"] = "reference"
    url: str
    question: str
    reg_id: str
    answer: str
    crt_date: str = ""
    # 0: solved, 1: unsolved
    solution: Optional[int] = None
    keyword: Optional[List[str]] = None
    classes: Optional[List[NdcClass]] = None
    res_type: Optional[str] = None
    con_type: Optional[str] = None
    bibl: Optional[List[Bibl]] = None
    ans_proc: Optional[str] = None
    referral: Optional[List[str]] = None
    pre_res: Optional[str] = None
    note: Optional[str] = None
    ptn_type: Optional[str] = None
    contri: Optional[List[str]] = None
    system: RawSystemInfo


class RawManual(_Raw):
    kind: Literal["manual"] = "manual"
    url: str
    theme: str
    reg_id: str
    guide: str
    crt_date: str
    # 0: complete, 1: incomplete
    completion: Optional[int] = None
    keyword: Optional[List[str]] = None
    classes: Optional[List[NdcClass]] = None
    bibl: Optional[List[Bibl]] = None
    note: Optional[str] = None
    system: RawSystemInfo


class RawCollection(_Raw):
    kind: Literal["collection"] = "collection"
    url: str
    col_name: str
    pro_key: str
    reg_id: str
    outline: str
    origin: Optional[str] = None
    restriction: Optional[str] = None
    catalog: Optional[str] = None
    literature: Optional[str] = None
    number: Optional[str] = None
    # "0": continued, "1": closed
    continue_: Optional[str] = None
    keyword: Optional[List[str]] = None
    classes: Optional[List[NdcClass]] = None
    note: Optional[str] = None
    system: RawSystemInfo


class RawProfile(_Raw):
    kind: Literal["profile"] = "profile"
    url: str
    lib_type: str
    lib_name: str
    abbr: str
    pro_key: str
    zip_code: str
    add_pref: str
    add_city: str
    add_street: str
    tel1: str
    tel1_note: Optional[str] = None
    tel2: Optional[str] = None
    tel2_note: Optional[str] = None
    tel3: Optional[str] = None
    tel3_note: Optional[str] = None
    fax: Optional[str] = None
    e_mail: Optional[str] = None
    lib_url: Optional[str] = None
    open_info: Optional[str] = None
    restriction: Optional[str] = None
    outline: Optional[str] = None
    feature: Optional[str] = None
    notes: Optional[str] = None
    access: Optional[str] = None
    isil: Optional[str] = None
    system: RawProfileSystemInfo


RawResult = Annotated[
    Union[RawReference, RawManual, RawCollection, RawProfile],
    Field(discriminator="kind"),
]


class RawResultSet(_Raw):
    """Decoded ``result_set`` document."""

    hit_num: Optional[int] = None
    results_get_position: int = 0
    results_num: int = 0
    # 0: success, otherwise see err_list
    results_cd: int
    err_list: Optional[List[ErrorEntry]] = None
    result: Optional[List[RawResult]] = None


__all__ = [
    "NdcClass",
    "Bibl",
    "RawSystemInfo",
    "RawProfileSystemInfo",
    "ErrorEntry",
    "RawReference",
    "RawManual",
    "RawCollection",
    "RawProfile",
    "RawResult",
    "RawResultSet",
]
