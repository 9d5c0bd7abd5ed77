# main.py
from flask import Flask, request, render_template_string, jsonify
import logging, os

from bmr import RANGES, Gender, perform_calculation

logger = logging.getLogger(__name__)

app = Flask(__name__)

PAGE = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>BMR Calculator</title>
  <style>
    :root {
      --bg: #0b0f14;
      --card: #121822;
      --muted: #9fb0c3;
      --text: #e9eef5;
      --danger: #ff6b6b;
      --ok: #51cf66;
      --neutral: #e1e5e9;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Arial;
      background: radial-gradient(1200px 800px at 80% -20%, #1a2332 0%, #0b0f14 60%);
      color: var(--text);
      opacity: 0;
      transition: opacity 0.5s ease-in-out;
    }
    body.loaded { opacity: 1; }
    .wrap { max-width: 640px; margin: 40px auto; padding: 16px; }
    .calculator {
      background: linear-gradient(180deg, #121822, #0e141d);
      border: 1px solid #1f2a3a;
      border-radius: 16px;
      padding: 24px;
      box-shadow: 0 10px 30px #0006, inset 0 1px 0 #ffffff12;
    }
    h1 { margin: 0 0 8px 0; font-weight: 700; }
    p.muted { color: var(--muted); margin-top: 0; }
    .field { padding: 12px; margin-bottom: 12px; border-radius: 12px; background: #0b111a; border: 1px solid #1b2636; }
    .label { font-size: 12px; color: var(--muted); margin-bottom: 6px; display: block; }
    input[type="number"]{
      width: 100%;
      font-size: 16px;
      padding: 10px 12px;
      border-radius: 8px;
      border: 1px solid var(--neutral);
      background: #0f1622;
      color: var(--text);
      outline: none;
    }
    .radio-row { display: flex; gap: 10px; }
    .radio {
      display: inline-flex; align-items: center; gap: 8px;
      font-size: 13px; color: var(--muted);
      padding: 6px 10px; border: 1px solid #1b2636; border-radius: 999px;
      cursor: pointer; user-select: none;
    }
    .hint { font-size: 12px; color: var(--muted); margin-top: 6px; }
    .buttons { margin-top: 16px; display: flex; gap: 12px; }
    button {
      padding: 12px 16px;
      border-radius: 10px;
      border: 1px solid #24334a;
      background: #142033;
      color: var(--text);
      cursor: pointer;
      font-weight: 600;
    }
    button.primary { background: linear-gradient(180deg, #1c3454, #142441); border-color: #33527a; }
    .error-message {
      background: var(--danger);
      color: white;
      padding: 15px;
      border-radius: 8px;
      margin-bottom: 20px;
      text-align: center;
      font-weight: 500;
      animation: slideDown 0.3s ease-out;
    }
    .result { padding: 16px; border-radius: 12px; background: #0e1520; text-align: center; }
    .result .value { font-size: 40px; font-weight: 700; color: var(--ok); }
    @keyframes slideDown {
      from { opacity: 0; transform: translateY(-10px); }
      to { opacity: 1; transform: translateY(0); }
    }
  </style>
</head>
<body>
  <div class="wrap">
    <div class="calculator">
      {% if error %}
        <div class="error-message">{{ error }}</div>
      {% endif %}

      <h1>BMR Calculator</h1>
      <p class="muted">Basal Metabolic Rate by the Harris-Benedict equation. Metric units.</p>

      <div id="resultSection" class="result" {% if bmr is none %}style="display:none"{% endif %}>
        <div class="label">Your basal metabolic rate</div>
        <div class="value"><span id="bmrResult">{% if bmr is not none %}{{ bmr|thousands }}{% endif %}</span></div>
        <div class="hint">kcal/day</div>
        <div class="buttons" style="justify-content:center">
          <button type="button" id="resetBtn">Recalculate</button>
        </div>
      </div>

      <form id="calcForm" class="input-section" method="POST" novalidate {% if bmr is not none %}style="display:none"{% endif %}>
        <div class="field">
          <span class="label">Gender</span>
          <div class="radio-row">
            <label class="radio"><input type="radio" name="gender" value="male" {% if form.gender != 'female' %}checked{% endif %}> Male</label>
            <label class="radio"><input type="radio" name="gender" value="female" {% if form.gender == 'female' %}checked{% endif %}> Female</label>
          </div>
        </div>

        <div class="field">
          <label class="label" for="age">Age (years)</label>
          <input type="number" id="age" name="age" min="{{ ranges.age[0] }}" max="{{ ranges.age[1] }}" step="1" placeholder="e.g., 30" value="{{ form.age or '' }}" inputmode="numeric">
          <div class="hint">Allowed: {{ ranges.age[0] }}–{{ ranges.age[1] }} years</div>
        </div>

        <div class="field">
          <label class="label" for="height">Height (cm)</label>
          <input type="number" id="height" name="height" min="{{ ranges.height[0]|int }}" max="{{ ranges.height[1]|int }}" step="0.1" placeholder="e.g., 175" value="{{ form.height or '' }}" inputmode="decimal">
          <div class="hint">Allowed: {{ ranges.height[0]|int }}–{{ ranges.height[1]|int }} cm</div>
        </div>

        <div class="field">
          <label class="label" for="weight">Weight (kg)</label>
          <input type="number" id="weight" name="weight" min="{{ ranges.weight[0]|int }}" max="{{ ranges.weight[1]|int }}" step="0.1" placeholder="e.g., 70" value="{{ form.weight or '' }}" inputmode="decimal">
          <div class="hint">Allowed: {{ ranges.weight[0]|int }}–{{ ranges.weight[1]|int }} kg</div>
        </div>

        <div class="buttons">
          <button type="submit" id="submitBtn" class="primary">Calculate</button>
          <button type="button" id="clearBtn">Reset</button>
        </div>
      </form>
    </div>
  </div>

  <script>
    const numberInputs = document.querySelectorAll('input[type="number"]');

    // live border colouring
    function markValidity(el){
      if(el.value && el.checkValidity()) el.style.borderColor = '#51cf66';
      else if(el.value) el.style.borderColor = '#ff6b6b';
      else el.style.borderColor = '#e1e5e9';
    }

    // error notice goes away after 3s
    document.querySelectorAll('.error-message').forEach(n => {
      setTimeout(() => { if(n.parentNode) n.remove(); }, 3000);
    });

    function resetCalculator(){
      document.getElementById('resultSection').style.display = 'none';
      document.getElementById('calcForm').style.display = 'block';
      numberInputs.forEach(el => { el.value = ''; markValidity(el); });
      document.querySelector('input[name="gender"][value="male"]').checked = true;
      document.querySelectorAll('.error-message').forEach(n => n.remove());
      window.scrollTo({ top: 0, behavior: 'smooth' });
    }

    function wire(){
      numberInputs.forEach(inp => {
        inp.addEventListener('input', () => markValidity(inp));
        inp.addEventListener('keypress', e => {
          if(e.key === 'Enter'){ e.preventDefault(); document.getElementById('calcForm').submit(); }
        });
        if(inp.value) markValidity(inp);
      });
      document.getElementById('resetBtn').addEventListener('click', resetCalculator);
      document.getElementById('clearBtn').addEventListener('click', resetCalculator);

      const result = document.getElementById('resultSection');
      if(result.style.display !== 'none'){
        setTimeout(() => result.scrollIntoView({ behavior: 'smooth', block: 'start' }), 100);
      }
      setTimeout(() => document.body.classList.add('loaded'), 100);
    }

    wire();
  </script>
</body>
</html>
"""


@app.template_filter("thousands")
def thousands(n):
    return f"{n:,}"


def read_fields(source):
    return {
        "gender": source.get("gender", ""),
        "age": source.get("age", ""),
        "height": source.get("height", ""),
        "weight": source.get("weight", ""),
    }


def run(fields):
    # An unticked radio falls back to the page default.
    gender = fields["gender"] or Gender.MALE.value
    outcome = perform_calculation(gender, fields["age"], fields["height"], fields["weight"])
    if outcome.ok:
        logger.info("BMR calculated: %s kcal/day (gender=%s)", outcome.bmr, gender)
    else:
        logger.info("Rejected input: %s", outcome.message)
    return outcome


@app.route("/", methods=["GET","POST"])
def index():
    form = read_fields(request.form)

    if request.method == "GET":
        return render_template_string(PAGE, bmr=None, error=None, form=form, ranges=RANGES)

    outcome = run(form)
    if not outcome.ok:
        return render_template_string(PAGE, bmr=None, error=outcome.message, form=form, ranges=RANGES)
    return render_template_string(PAGE, bmr=outcome.bmr, error=None, form=form, ranges=RANGES)


@app.route("/api/bmr", methods=["POST"])
def api_bmr():
    payload = request.get_json(silent=True) if request.is_json else request.form
    if not hasattr(payload, "get"):
        payload = {}
    outcome = run(read_fields(payload))
    if not outcome.ok:
        return jsonify(ok=False, message=outcome.message), 400
    return jsonify(ok=True, bmr=outcome.bmr)


def configure_logging():
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    configure_logging()
    port = int(os.environ.get("PORT", 8080))
    host = os.environ.get("HOST", "0.0.0.0")
    app.run(host=host, port=port)
