from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from contextsearch import TextSearcher, load_searcher, configure_logging
from contextsearch.config import DEFAULT_CONTEXT_WORDS

app = Flask(__name__)
_searcher: TextSearcher | None = None

# ---------- API ----------
@app.get("/api/search")
def api_search():
    if _searcher is None:
        return jsonify({"error": "no text loaded"}), 503
    q = request.args.get("q", "", type=str)
    raw = request.args.get("context", str(DEFAULT_CONTEXT_WORDS), type=str)
    try:
        n = int(raw)
    except ValueError:
        return jsonify({"error": f"context must be an integer, got {raw!r}"}), 400
    if not q:
        return jsonify([])
    try:
        rows = _searcher.search_matches(q, n)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify([r.to_dict() for r in rows])

@app.get("/health")
def health():
    if _searcher is None:
        return jsonify({"ok": False}), 503
    return jsonify({
        "ok": True,
        "tokens": len(_searcher),
        "words": _searcher.word_count,
        "cache": _searcher.cache_info().to_dict(),
    })

# ---------- UI ----------
@app.get("/")
def home():
    # single page, no external deps
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>Context Search</title>
<style>
body{margin:0;background:#0b0f14;color:#cfd8e3;font:16px/1.45 system-ui,Arial}
.container{max-width:980px;margin:24px auto;padding:0 16px}
input{padding:10px 12px;border-radius:10px;border:1px solid #1c2530;background:#0b1117;color:#cfd8e3}
#q{width:60%}
#n{width:64px}
.row{padding:10px 14px;border-top:1px solid #1c2530;white-space:pre-wrap}
.mark{background:rgba(110,231,255,.2)}
.small{color:#8a94a6;font-size:13px}
</style>
</head>
<body>
  <div class="container">
    <h1>Context Search</h1>
    <input id="q" type="text" placeholder="Word to find…" autofocus />
    <input id="n" type="number" min="0" value="3" />
    <div id="stats" class="small">Ready.</div>
    <div id="out"></div>
  </div>
<script>
const q = document.querySelector("#q"), n = document.querySelector("#n");
const out = document.querySelector("#out"), stats = document.querySelector("#stats");
function esc(s){return s.replace(/[&<>]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;"}[c]))}
let t;
async function search(){
  if(!q.value){ out.innerHTML = ""; stats.textContent = "Ready."; return; }
  const resp = await fetch(`/api/search?q=${encodeURIComponent(q.value)}&context=${n.value || 0}`);
  const data = await resp.json();
  if(!resp.ok){ stats.textContent = `Error: ${data.error}`; return; }
  stats.textContent = `Results: ${data.length}`;
  out.innerHTML = data.map(r =>
    `<div class="row">${esc(r.before)}<span class="mark">${esc(r.match)}</span>${esc(r.after)}</div>`
  ).join("");
}
function debounced(){ clearTimeout(t); t = setTimeout(search, 150); }
q.addEventListener("input", debounced);
n.addEventListener("change", debounced);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve context search over one text file")
    ap.add_argument("--file", required=True, help="Text file to search")
    ap.add_argument("--encoding", default=None)
    ap.add_argument("--strip-trailing", action="store_true",
                    help="Strip trailing commas/whitespace from every result")
    ap.add_argument("--no-cache", action="store_true", help="Disable query memoization")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    configure_logging(args.verbose)

    global _searcher
    try:
        _searcher = load_searcher(
            args.file,
            encoding=args.encoding,
            strip_trailing=args.strip_trailing,
            use_cache=not args.no_cache,
        )
    except OSError as exc:
        ap.error(f"cannot read {args.file}: {exc}")

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
