"""
Host page markup. Renderers in ``runclub.views`` fill these pages through
stable anchors: ``.data-table tbody``, ``.stat-value``, ``.activity-feed``,
``#user-welcome`` and ``#tracker-feedback``.
"""
from html import escape

from runclub.config import PLEDGE_OPTIONS

STYLE = """
  <style>
    :root {
      --bg: #eef4f0;
      --panel: #ffffff;
      --line: #d7e4dc;
      --text: #172333;
      --muted: #6b7e93;
      --nav: #0f3d2e;
      --good: #00a36c;
      --warn: #b35d2a;
      --shadow: 0 12px 26px rgba(11, 25, 41, 0.08);
      --radius: 12px;
    }

    * { box-sizing: border-box; }
    body { margin: 0; font-family: system-ui, sans-serif; background: var(--bg); color: var(--text); }
    nav { display: flex; gap: 18px; align-items: center; padding: 14px 24px; background: var(--nav); }
    nav a { color: #fff; text-decoration: none; font-weight: 600; }
    .profile { margin-left: auto; display: flex; gap: 12px; color: #fff; }
    main { max-width: 960px; margin: 24px auto; padding: 0 16px; }
    .panel { background: var(--panel); border: 1px solid var(--line); border-radius: var(--radius); box-shadow: var(--shadow); padding: 20px; margin-bottom: 20px; }
    .stats { display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px; }
    .stat-label { color: var(--muted); font-size: 13px; text-transform: uppercase; }
    .stat-value { font-size: 28px; font-weight: 700; }
    .data-table { width: 100%; border-collapse: collapse; }
    .data-table th, .data-table td { padding: 10px; border-bottom: 1px solid var(--line); text-align: left; }
    .ethics-badge { background: #e2f6ec; color: var(--good); border-radius: 999px; padding: 2px 10px; font-size: 12px; font-weight: 700; }
    .activity-feed { list-style: none; margin: 0; padding: 0; }
    .activity-item { display: flex; justify-content: space-between; padding: 10px 0; border-bottom: 1px solid var(--line); }
    .activity-left { display: flex; flex-direction: column; }
    .activity-date { color: var(--muted); font-size: 12px; }
    .activity-amount { color: var(--good); font-weight: 700; }
    .success-message { border-left: 4px solid var(--good); padding: 8px 16px; }
    .warning-message { border-left: 4px solid var(--warn); padding: 8px 16px; }
    .alert { color: var(--warn); font-weight: 600; white-space: pre-line; }
    form label { display: block; margin: 10px 0 4px; }
    form input, form select { padding: 8px; width: 100%; max-width: 360px; }
    button { margin-top: 14px; padding: 10px 18px; background: var(--good); color: #fff; border: 0; border-radius: 8px; }
  </style>
"""


def layout(title: str, body: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{title} | Run Club</title>
{STYLE}
</head>
<body>
  <nav>
    <a href="/dashboard">My Impact</a>
    <a href="/tracker">Run Tracker</a>
    <a href="/leaderboard">Leaderboard</a>
    <div class="profile">
      <span id="user-welcome">Welcome</span>
      <a href="/logout">Logout</a>
    </div>
  </nav>
  <main>
{body}
  </main>
</body>
</html>
"""


def _alert(message: str | None) -> str:
    if not message:
        return ""
    return f'<p class="alert">{escape(message)}</p>'


def login_page(message: str | None = None) -> str:
    return layout(
        "Login",
        f"""
    <section class="panel">
      <h1>Login</h1>
      {_alert(message)}
      <form method="post" action="/login">
        <label for="email">Email</label>
        <input id="email" name="email" type="email" required />
        <button type="submit">Login</button>
      </form>
      <p>New here? <a href="/signup">Create an account</a></p>
    </section>""",
    )


def signup_page(message: str | None = None) -> str:
    return layout(
        "Sign Up",
        f"""
    <section class="panel">
      <h1>Sign Up</h1>
      {_alert(message)}
      <form method="post" action="/signup">
        <label for="fullname">Full name</label>
        <input id="fullname" name="fullname" type="text" required />
        <label for="pledge">
          <input id="pledge" name="pledge" type="checkbox" value="yes" style="width:auto" />
          I agree to the Community Pledge
        </label>
        <button type="submit">Join the club</button>
      </form>
    </section>""",
    )


def _pledge_select() -> str:
    options = "\n".join(
        f'          <option value="{escape(key)}">{escape(label)}</option>' for key, label in PLEDGE_OPTIONS.items()
    )
    return f"""<select id="pledge" name="pledge">
{options}
        </select>"""


def tracker_page() -> str:
    return layout(
        "Run Tracker",
        f"""
    <section class="panel">
      <h1>Log a Run</h1>
      <form method="post" action="/tracker">
        <label for="distance">Distance (km)</label>
        <input id="distance" name="distance" type="number" step="0.01" min="0" required />
        <label for="pledge">Pledge this run to</label>
        {_pledge_select()}
        <button type="submit">Log Run</button>
      </form>
      <div id="tracker-feedback"></div>
    </section>
    <section class="panel">
      <h2>Run History</h2>
      <table class="data-table">
        <thead>
          <tr><th>Date</th><th>Distance</th><th>Pace</th><th>Pledge</th><th>Wealth Shared</th></tr>
        </thead>
        <tbody></tbody>
      </table>
    </section>""",
    )


def dashboard_page() -> str:
    return layout(
        "My Impact Dashboard",
        """
    <section class="stats">
      <div class="panel"><div class="stat-label">Wealth Shared</div><div class="stat-value">$0.00</div></div>
      <div class="panel"><div class="stat-label">Distance Run</div><div class="stat-value">0.0 km</div></div>
      <div class="panel"><div class="stat-label">Active Pledge</div><div class="stat-value">None</div></div>
    </section>
    <section class="panel">
      <h2>Recent Activity</h2>
      <ul class="activity-feed"></ul>
    </section>""",
    )


def leaderboard_page() -> str:
    # third row is reserved for the current user
    return layout(
        "Leaderboard",
        """
    <section class="panel">
      <h1>Community Leaderboard</h1>
      <table class="data-table">
        <thead>
          <tr><th>Rank</th><th>Runner</th><th>Distance</th><th>Pledge</th><th>Wealth Shared</th></tr>
        </thead>
        <tbody>
          <tr><td>1</td><td>Maya Chen</td><td>142.0 km</td><td><span class="ethics-badge">FOODBANK</span></td><td>$142.00</td></tr>
          <tr><td>2</td><td>Jordan Okafor</td><td>118.5 km</td><td><span class="ethics-badge">RELIEFFUND</span></td><td>$118.50</td></tr>
          <tr><td>3</td><td>You</td><td>0.0 km</td><td>-</td><td>$0.00</td></tr>
          <tr><td>4</td><td>Sam Rivera</td><td>64.2 km</td><td><span class="ethics-badge">SHELTERAID</span></td><td>$64.20</td></tr>
        </tbody>
      </table>
    </section>""",
    )
