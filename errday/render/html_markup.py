# errday/render/html_markup.py
from __future__ import annotations

BODY_MARKUP = r"""<main>
  <section class="top">
    <div class="thought">
      <div class="thought-box">
        <p id="thought" class="thought-text"></p>
        <p id="overlay" class="overlay"></p>
      </div>
      <p id="notice" class="notice" hidden></p>
    </div>
    <section class="art" aria-label="Current daily art">
      <div id="grid" class="grid"></div>
    </section>
  </section>
  <footer>
    <div class="brand">
      <p id="title"></p>
      <p id="tagline"></p>
    </div>
    <p id="date" class="date"></p>
    <p id="state" class="state"></p>
  </footer>
</main>"""
