from jinja2 import Environment, select_autoescape

_env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))

LOADING_HTML = _env.from_string(
    """<div data-testid="loading-message" class="loading-message">Loading word...</div>"""
)

ERROR_HTML = _env.from_string(
    """<div data-testid="error-message" class="error-message">{{ message }}</div>"""
)

WORD_HTML = _env.from_string(
    """
<div class="word-display word-pair">
  <p data-testid="english-word" class="english-word"><strong>English:</strong> {{ english_word }}</p>
  <p data-testid="german-word" class="german-word" hidden><strong>German:</strong> {{ german_word }}</p>
</div>
""".strip()
)

# La page charge /word-card au démarrage puis à chaque clic sur "Next Word".
# hx-sync remplace la requête en cours : chaque navigateur ne voit que la dernière.
PAGE_HTML = _env.from_string(
    """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <script src="https://unpkg.com/htmx.org@1.9.12"></script>
</head>
<body>
  <h1>{{ title }}</h1>
  <div id="word-container" data-testid="word-container"
       hx-get="{{ card_url }}" hx-trigger="load, click from:#new-word-button"
       hx-swap="innerHTML" hx-sync="this:replace">
    {{ loading | safe }}
  </div>
  <button id="new-word-button" data-testid="new-word-button" type="button">Next Word</button>
  <button id="show-answer-button" data-testid="show-answer-button" type="button">Show Answer</button>
  <script>
    const wordContainer = document.getElementById("word-container");
    wordContainer.addEventListener("htmx:beforeRequest", () => {
      wordContainer.innerHTML = {{ loading | tojson }};
    });
    wordContainer.addEventListener("htmx:sendError", () => {
      wordContainer.innerHTML = {{ connection_error | tojson }};
    });
    wordContainer.addEventListener("htmx:responseError", () => {
      wordContainer.innerHTML = {{ server_error | tojson }};
    });
    document.getElementById("show-answer-button").addEventListener("click", () => {
      const german = wordContainer.querySelector('[data-testid="german-word"]');
      if (german) {
        german.hidden = false;
      }
    });
  </script>
</body>
</html>
""".strip()
)
