# errday/render/inline_css.py
from __future__ import annotations

CSS_BLOCK = r"""  * { box-sizing: border-box; }
  body { margin: 0; background: #fff; color: #000; font-family: ui-monospace, Menlo, Consolas, monospace; }
  main { display: flex; min-height: 100vh; flex-direction: column; padding: 20px; }
  .top { display: flex; align-items: flex-start; justify-content: space-between; gap: 40px; }
  .thought { width: 100%; max-width: 632px; }
  .thought-box { position: relative; height: 196px; border: 2px solid #000; }
  .thought-text { margin: 0; padding: 20px; letter-spacing: 0.08em; white-space: pre-wrap; }
  .overlay { position: absolute; inset: 0; display: grid; place-items: center; margin: 0; padding: 0 32px; text-align: center; letter-spacing: 0.08em; }
  .notice { font-size: 12px; color: #047857; }
  .art { position: relative; width: 328px; height: 352px; flex-shrink: 0; }
  .grid { position: absolute; inset: 14px; display: grid; grid-template-columns: repeat(var(--n, 20), 1fr); }
  footer { margin-top: auto; display: grid; grid-template-columns: 1fr auto 1fr; align-items: end; gap: 24px; padding-top: 40px; }
  .brand p { margin: 0 0 8px 0; }
  .date { letter-spacing: 0.08em; justify-self: center; }
  .state { justify-self: end; font-size: 12px; text-transform: uppercase; }
  @media (max-width: 1200px) {
    .top { flex-direction: column; }
    footer { grid-template-columns: 1fr; }
    .date, .state { justify-self: start; }
  }"""
