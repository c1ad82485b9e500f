import base64
import re
from html import escape
from typing import Sequence

from dto import Page, WordItem
from pager import PAGE_SIZE

FOUR_LINE_SVG = """
<svg xmlns="http://www.w3.org/2000/svg" width="100%" height="100%" viewBox="0 0 100 20" preserveAspectRatio="none">
  <line x1="0" y1="0" x2="100" y2="0" stroke="#B0B0B0" stroke-width="0.5"/>
  <line x1="0" y1="5" x2="100" y2="5" stroke="#B0B0B0" stroke-width="0.5"/>
  <line x1="0" y1="10" x2="100" y2="10" stroke="#000000" stroke-width="0.8"/>
  <line x1="0" y1="15" x2="100" y2="15" stroke="#B0B0B0" stroke-width="0.5"/>
</svg>
""".strip()

EMPTY_CHAPTER_LABEL = '(未設定)'

STYLE = """
  @page { size: A4; margin: 8mm; }
  @media print {
    body { -webkit-print-color-adjust: exact; print-color-adjust: exact; }
    .no-print { display: none !important; }
  }
  body { font-family: 'Hiragino Sans', 'Yu Gothic', sans-serif; margin: 0; padding: 0; background: white; }
  .page { width: 210mm; min-height: 297mm; padding: 8mm; margin: 0 auto; page-break-after: always; box-sizing: border-box; }
  .page:last-child { page-break-after: auto; }
  .header { margin-bottom: 10mm; }
  .header-row { display: flex; gap: 8mm; margin-bottom: 5mm; }
  .title-box { flex: 0 0 60%; border: 1px solid #333; border-radius: 8px; padding: 8mm; font-size: 14pt; font-weight: bold; }
  .info-boxes { flex: 1; display: flex; gap: 5mm; }
  .info-box { flex: 1; border: 1px solid #333; border-radius: 8px; padding: 5mm; font-size: 10pt; }
  .chapter-info { font-size: 10pt; }
  .questions { display: grid; grid-template-columns: 1fr 1fr; gap: 5mm 10mm; }
  .question-row { display: flex; gap: 8mm; align-items: flex-start; }
  .question-label { width: 28mm; font-size: 10pt; font-weight: bold; }
  .answer-text { font-size: 8pt; color: #777; margin-top: 2mm; }
  .fourline-box {
    flex: 1; height: 18mm; border: 1px solid #ddd; border-radius: 6px;
    background-image: url('data:image/svg+xml;base64,{svg}');
    background-size: 100% 20mm; background-repeat: no-repeat; background-position: center;
  }
  .footer-note { margin-top: 5mm; font-size: 8pt; color: #666; }
  .no-print { padding: 20px; background: #f0f0f0; margin-bottom: 20px; text-align: center; }
"""

FOOTER_NOTE = (
    '※ 4線は小文字のアセンダー・ディセンダー位置の目安です。'
    '提出前につづり・大文字小文字を確認しましょう。'
)


def output_filename(title: str) -> str:
    return re.sub(r'[/\\?%*:|"<>]', '-', title or 'word-test') + '.html'


def _render_question(index: int, item: WordItem | None, show_answer_key: bool) -> str:
    japanese = item.japanese if item else ''
    english = item.english if item else ''
    answer = ''
    if show_answer_key and english:
        answer = f'<div class="answer-text">Answer: {escape(english)}</div>'
    return f"""
    <div class="question-row">
      <div class="question-label">（{index}）{escape(japanese)}{answer}</div>
      <div class="fourline-box"></div>
    </div>"""


def render_page(page: Page, title: str, show_answer_key: bool = False) -> str:
    # unused slots stay as blank prompts so every sheet has the same grid
    questions = ''.join(
        _render_question(
            i + 1, page.items[i] if i < len(page.items) else None, show_answer_key
        )
        for i in range(PAGE_SIZE)
    )
    return f"""
<div class="page">
  <div class="header">
    <div class="header-row">
      <div class="title-box">{escape(title)}（　）年（　）組 氏名（　　　　　　　　　）</div>
      <div class="info-boxes">
        <div class="info-box"><div style="font-weight: bold;">学習日</div><div>　　月　　日（　）</div></div>
        <div class="info-box"><div style="font-weight: bold;">検印</div><div style="font-weight: bold;">評価</div></div>
      </div>
    </div>
    <div class="chapter-info">単元：<strong>{escape(page.chapter or EMPTY_CHAPTER_LABEL)}</strong> ／ 英単語の書き取りをしましょう。（各1点）</div>
  </div>
  <div class="questions">{questions}
  </div>
  <div class="footer-note">{FOOTER_NOTE}</div>
</div>"""


def render_html(pages: Sequence[Page], title: str, show_answer_key: bool = False) -> str:
    """Render pages as a standalone HTML document, one A4 sheet per page."""
    svg = base64.b64encode(FOUR_LINE_SVG.encode('utf-8')).decode('ascii')
    body = ''.join(render_page(page, title, show_answer_key) for page in pages)
    return f"""<!DOCTYPE html>
<html lang="ja">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{escape(title)}</title>
<style>{STYLE.replace('{svg}', svg)}</style>
</head>
<body>
<div class="no-print">
  <h2>英単語テストプリント</h2>
  <p>このHTMLファイルを開いて、ブラウザの印刷機能（Ctrl+P または Cmd+P）でPDFとして保存してください。</p>
  <button onclick="window.print()">印刷画面を開く</button>
</div>{body}
</body>
</html>
"""
