"""Shared CRD XML samples."""

from __future__ import annotations

SYSTEM = """
<system>
  <reg-date>20200101120000</reg-date>
  <lst-date>20210202130000</lst-date>
  <sys-id>1000001</sys-id>
  <lib-id>1110001</lib-id>
  <lib-name>北海道立図書館</lib-name>
  <file-num>2</file-num>
</system>
"""

PROFILE_SYSTEM = """
<system>
  <reg-date>20190101000000</reg-date>
  <lst-date>20230101000000</lst-date>
  <lib-id>2200001</lib-id>
  <lib-name>長野県立長野図書館</lib-name>
</system>
"""


def reference_xml(solution: str | None = "0", crt_date: str | None = "20200101") -> str:
    solution_xml = f"<solution>{solution}</solution>" if solution is not None else ""
    crt_date_xml = f"<crt-date>{crt_date}</crt-date>" if crt_date is not None else ""
    return f"""
<reference>
  <question>北海道の開拓史について知りたい</question>
  <reg-id>HOKKAIDO-001</reg-id>
  <answer>以下の資料を紹介した。</answer>
  {crt_date_xml}
  {solution_xml}
  <keyword>北海道</keyword>
  <keyword>開拓</keyword>
  <classes type="NDC" code="9">211</classes>
  <res-type>文献紹介</res-type>
  <con-type>郷土</con-type>
  <bibl>
    <bibl-desc>『新北海道史』</bibl-desc>
    <bibl-isbn>9784000000000</bibl-isbn>
  </bibl>
  <ans-proc>目録を検索した。</ans-proc>
  <referral>北海道博物館</referral>
  <pre-res>なし</pre-res>
  <ptn-type>社会人</ptn-type>
  <contri>司書A</contri>
  <url>https://crd.ndl.go.jp/reference/detail?page=ref_view&amp;id=1000001</url>
  {SYSTEM}
</reference>
"""


def manual_xml(completion: str | None = "0") -> str:
    completion_xml = f"<completion>{completion}</completion>" if completion is not None else ""
    return f"""
<manual>
  <theme>郷土資料の調べ方</theme>
  <reg-id>MANUAL-001</reg-id>
  <guide>まず郷土資料目録を確認する。</guide>
  <crt-date>20190505</crt-date>
  {completion_xml}
  <url>https://crd.ndl.go.jp/reference/detail?page=man_view&amp;id=2000001</url>
  {SYSTEM}
</manual>
"""


def collection_xml(cont: str | None = "0") -> str:
    continue_xml = f"<continue>{cont}</continue>" if cont is not None else ""
    return f"""
<collection>
  <col-name>松浦武四郎文庫</col-name>
  <pro_key>マツウラタケシロウブンコ</pro_key>
  <reg-id>COL-001</reg-id>
  <outline>松浦武四郎の旧蔵書。</outline>
  <number>約500点</number>
  {continue_xml}
  <url>https://crd.ndl.go.jp/reference/detail?page=col_view&amp;id=3000001</url>
  {SYSTEM}
</collection>
"""


def profile_xml() -> str:
    return f"""
<profile>
  <lib-type>21</lib-type>
  <lib-name>長野県立長野図書館</lib-name>
  <abbr>県立長野</abbr>
  <pro-key>ナガノケンリツナガノトショカン</pro-key>
  <zip-code>380-0928</zip-code>
  <add-pref>長野県</add-pref>
  <add-city>長野市</add-city>
  <add-street>若里1-1-4</add-street>
  <tel1>026-228-4500</tel1>
  <lib-url>https://www.library.pref.nagano.jp/</lib-url>
  <isil>JP-1000001</isil>
  <url>https://crd.ndl.go.jp/reference/detail?page=pro_view&amp;id=4000001</url>
  {PROFILE_SYSTEM}
</profile>
"""


def result_set_xml(*entries: str, hit_num: int | None = None, results_cd: int = 0) -> str:
    hit = f"<hit_num>{hit_num if hit_num is not None else len(entries)}</hit_num>"
    results = "".join(f"<result>{entry}</result>" for entry in entries)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<result_set>
  {hit}
  <results_get_position>1</results_get_position>
  <results_num>{len(entries)}</results_num>
  <results_cd>{results_cd}</results_cd>
  {results}
</result_set>
"""


def error_set_xml(*errors: tuple[str, str, str]) -> str:
    items = "".join(
        f"<err_item><err_code>{code}</err_code><err_fld>{fld}</err_fld>"
        f"<err_msg>{msg}</err_msg></err_item>"
        for code, fld, msg in errors
    )
    err_list = f"<err_list>{items}</err_list>" if errors else ""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<result_set>
  <results_cd>1</results_cd>
  {err_list}
</result_set>
"""

