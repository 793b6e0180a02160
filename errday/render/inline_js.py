# errday/render/inline_js.py
from __future__ import annotations

JS_BLOCK = r"""(function () {
  "use strict";
  const el = document.getElementById("errday-data");
  let DATA = {};
  try { DATA = JSON.parse(el.textContent || "{}"); } catch (_) { DATA = {}; }

  const state = DATA.state || {};
  const footer = DATA.footer || {};
  const n = Number(DATA.grid_size) || 0;
  const cells = Array.isArray(DATA.cells) ? DATA.cells : [];

  const grid = document.getElementById("grid");
  grid.style.setProperty("--n", String(n));
  const frag = document.createDocumentFragment();
  for (let i = 0; i < n * n; i += 1) {
    const d = document.createElement("div");
    d.id = DATA.date_key + "-" + i;
    d.style.backgroundColor = cells[i] ? DATA.color : "transparent";
    frag.appendChild(d);
  }
  grid.appendChild(frag);

  const entry = typeof DATA.entry === "string" ? DATA.entry : "";
  document.getElementById("thought").textContent = entry;
  const overlay = document.getElementById("overlay");
  overlay.textContent = entry.length === 0 ? (state.overlay || "") : "";

  const notice = document.getElementById("notice");
  if (state.notice) {
    notice.textContent = state.notice;
    notice.hidden = false;
    window.setTimeout(function () { notice.hidden = true; }, 3200);
  }

  document.getElementById("title").textContent = footer.title || "";
  document.getElementById("tagline").textContent = footer.tagline || "";
  document.getElementById("date").textContent = DATA.display_date || "";
  const flags = [];
  if (state.is_today) flags.push("today");
  flags.push(state.editable ? "editable" : "locked");
  document.getElementById("state").textContent = flags.join(" / ");
})();"""
