"""Decode the CRD ``result_set`` XML document into raw records.

Decoding is tolerant in exactly one place: Reference entries that lack the
nominally required ``crt-date`` element decode with an empty creation date.
Every other missing required element is a DecodeError, and a malformed
document never yields partial results.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Union
from xml.etree import ElementTree

from ..models.upstream import (
    Bibl,
    ErrorEntry,
    NdcClass,
    RawCollection,
    RawManual,
    RawProfile,
    RawProfileSystemInfo,
    RawReference,
    RawResult,
    RawResultSet,
    RawSystemInfo,
)
from .errors import DecodeError

logger = logging.getLogger(__name__)

Element = ElementTree.Element


def _text(parent: Element, tag: str) -> Optional[str]:
    """Return the text of a child element, "" if empty, None if absent."""
    child = parent.find(tag)
    if child is None:
        return None
    return child.text or ""


def _required(parent: Element, tag: str) -> str:
    value = _text(parent, tag)
    if value is None:
        raise DecodeError(
            f"<{parent.tag}> is missing required element <{tag}>",
            details={"element": parent.tag, "missing": tag},
        )
    return value


def _int(parent: Element, tag: str) -> Optional[int]:
    value = _text(parent, tag)
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError as exc:
        raise DecodeError(
            f"<{tag}> is not an integer: {value!r}",
            details={"element": tag, "value": value},
        ) from exc


def _texts(parent: Element, tag: str) -> Optional[List[str]]:
    values = [child.text or "" for child in parent.findall(tag)]
    return values or None


def _classes(parent: Element) -> Optional[List[NdcClass]]:
    classes = [
        NdcClass(type=child.get("type", ""), code=child.get("code"), value=child.text)
        for child in parent.findall("classes")
    ]
    return classes or None


def _bibls(parent: Element) -> Optional[List[Bibl]]:
    bibls = [
        Bibl(
            desc=_text(child, "bibl-desc"),
            isbn=_text(child, "bibl-isbn"),
            note=_text(child, "bibl-note"),
        )
        for child in parent.findall("bibl")
    ]
    return bibls or None


def _system_element(parent: Element) -> Element:
    system = parent.find("system")
    if system is None:
        raise DecodeError(
            f"<{parent.tag}> is missing required element <system>",
            details={"element": parent.tag, "missing": "system"},
        )
    return system


def _system_fields(system: Element) -> Dict[str, Any]:
    return {
        "reg_date": _required(system, "reg-date"),
        "lst_date": _required(system, "lst-date"),
        "lib_id": _required(system, "lib-id"),
        "lib_name": _required(system, "lib-name"),
        "file_num": _int(system, "file-num") or 0,
    }


def _system(parent: Element) -> RawSystemInfo:
    system = _system_element(parent)
    return RawSystemInfo(sys_id=_required(system, "sys-id"), **_system_fields(system))


def _profile_system(parent: Element) -> RawProfileSystemInfo:
    return RawProfileSystemInfo(**_system_fields(_system_element(parent)))


def _decode_reference(elem: Element) -> RawReference:
    # crt-date is mandatory upstream but missing from some records
    crt_date = _text(elem, "crt-date")
    return RawReference(
        url=_required(elem, "url"),
        question=_required(elem, "question"),
        reg_id=_required(elem, "reg-id"),
        answer=_required(elem, "answer"),
        crt_date=crt_date if crt_date is not None else "",
        solution=_int(elem, "solution"),
        keyword=_texts(elem, "keyword"),
        classes=_classes(elem),
        res_type=_text(elem, "res-type"),
        con_type=_text(elem, "con-type"),
        bibl=_bibls(elem),
        ans_proc=_text(elem, "ans-proc"),
        referral=_texts(elem, "referral"),
        pre_res=_text(elem, "pre-res"),
        note=_text(elem, "note"),
        ptn_type=_text(elem, "ptn-type"),
        contri=_texts(elem, "contri"),
        system=_system(elem),
    )


def _decode_manual(elem: Element) -> RawManual:
    return RawManual(
        url=_required(elem, "url"),
        theme=_required(elem, "theme"),
        reg_id=_required(elem, "reg-id"),
        guide=_required(elem, "guide"),
        crt_date=_required(elem, "crt-date"),
        completion=_int(elem, "completion"),
        keyword=_texts(elem, "keyword"),
        classes=_classes(elem),
        bibl=_bibls(elem),
        note=_text(elem, "note"),
        system=_system(elem),
    )


def _decode_collection(elem: Element) -> RawCollection:
    return RawCollection(
        url=_required(elem, "url"),
        col_name=_required(elem, "col-name"),
        pro_key=_required(elem, "pro_key"),
        reg_id=_required(elem, "reg-id"),
        outline=_required(elem, "outline"),
        origin=_text(elem, "origin"),
        restriction=_text(elem, "restriction"),
        catalog=_text(elem, "catalog"),
        literature=_text(elem, "literature"),
        number=_text(elem, "number"),
        continue_=_text(elem, "continue"),
        keyword=_texts(elem, "keyword"),
        classes=_classes(elem),
        note=_text(elem, "note"),
        system=_system(elem),
    )


def _decode_profile(elem: Element) -> RawProfile:
    return RawProfile(
        url=_required(elem, "url"),
        lib_type=_required(elem, "lib-type"),
        lib_name=_required(elem, "lib-name"),
        abbr=_required(elem, "abbr"),
        pro_key=_required(elem, "pro-key"),
        zip_code=_required(elem, "zip-code"),
        add_pref=_required(elem, "add-pref"),
        add_city=_required(elem, "add-city"),
        add_street=_required(elem, "add-street"),
        tel1=_required(elem, "tel1"),
        tel1_note=_text(elem, "tel1-note"),
        tel2=_text(elem, "tel2"),
        tel2_note=_text(elem, "tel2-note"),
        tel3=_text(elem, "tel3"),
        tel3_note=_text(elem, "tel3-note"),
        fax=_text(elem, "fax"),
        e_mail=_text(elem, "e-mail"),
        lib_url=_text(elem, "lib-url"),
        open_info=_text(elem, "open-info"),
        restriction=_text(elem, "restriction"),
        outline=_text(elem, "outline"),
        feature=_text(elem, "feature"),
        notes=_text(elem, "notes"),
        access=_text(elem, "access"),
        isil=_text(elem, "isil"),
        system=_profile_system(elem),
    )


RESULT_DECODERS: Dict[str, Callable[[Element], RawResult]] = {
    "reference": _decode_reference,
    "manual": _decode_manual,
    "collection": _decode_collection,
    "profile": _decode_profile,
}


def _decode_result(elem: Element) -> RawResult:
    decoder = RESULT_DECODERS.get(elem.tag)
    if decoder is None:
        raise DecodeError(
            f"Unknown result type <{elem.tag}>",
            details={"element": elem.tag, "expected": sorted(RESULT_DECODERS)},
        )
    return decoder(elem)


def _decode_error(elem: Element) -> ErrorEntry:
    return ErrorEntry(
        err_code=_required(elem, "err_code"),
        err_fld=_required(elem, "err_fld"),
        err_msg=_required(elem, "err_msg"),
    )


def decode_result_set(body: Union[str, bytes]) -> RawResultSet:
    """Parse a CRD response body into a RawResultSet.

    Pass raw bytes to let the XML declaration choose the character encoding.

    Raises:
        DecodeError: If the body is not well-formed XML, ``results_cd`` is
            missing, or any entry lacks a required element.
    """
    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise DecodeError(
            "Response is not well-formed XML", details={"error": str(exc)}
        ) from exc

    results_cd = _int(root, "results_cd")
    if results_cd is None:
        raise DecodeError(
            "Response is missing <results_cd>", details={"root": root.tag}
        )

    err_lists = root.findall("err_list")
    results = root.findall("result")

    errors: Optional[List[ErrorEntry]] = None
    if err_lists:
        errors = [
            _decode_error(item)
            for err_list in err_lists
            for item in err_list.findall("err_item")
        ]

    entries: Optional[List[RawResult]] = None
    if results:
        entries = [_decode_result(child) for result in results for child in result]

    result_set = RawResultSet(
        hit_num=_int(root, "hit_num"),
        results_get_position=_int(root, "results_get_position") or 0,
        results_num=_int(root, "results_num") or 0,
        results_cd=results_cd,
        err_list=errors,
        result=entries,
    )

    logger.debug(
        "Decoded CRD result set",
        extra={
            "results_cd": result_set.results_cd,
            "hit_num": result_set.hit_num,
            "result_count": len(result_set.result or []),
            "error_count": len(result_set.err_list or []),
        },
    )
    return result_set


__all__ = ["RESULT_DECODERS", "decode_result_set"]
