# app.py
import random
import time
from io import BytesIO

import streamlit as st
from PIL import Image

from config import get_settings
from cube import COLORS, FACE_NAMES, FACES, FaceInput, is_valid, random_configuration, solved_configuration
from solver import describe_move, export_filename, export_solution, solve
from vision import decode_image, detect_face_colors_from_image

settings = get_settings()

st.set_page_config(page_title=settings.APP_NAME, layout="wide")

# --- CSS styling
st.markdown("""
<style>
body { background: linear-gradient(135deg, #0f172a, #1e293b); color: #e2e8f0; }
h1 { color:#FFD166; text-align:center; }
.card { background: rgba(255,255,255,0.03); padding: 12px; border-radius: 12px; box-shadow: 0 4px 20px rgba(0,0,0,0.4); }
.small { font-size:0.9rem; color:#cbd5e1; }
.net { display:grid; grid-template-columns: repeat(12, 18px); gap:2px; }
.sq { width:18px; height:18px; border-radius:3px; }
</style>
""", unsafe_allow_html=True)

COLOR_EMOJI = {"white": "⬜", "yellow": "🟨", "red": "🟥", "orange": "🟧", "blue": "🟦", "green": "🟩"}
EMPTY_SQUARE = "▫️"
COLOR_HEX = {
    "white": "#ffffff", "yellow": "#fbbf24", "red": "#ef4444",
    "orange": "#f97316", "blue": "#3b82f6", "green": "#10b981",
}

# Unfolded cube: (face, grid column, grid row) in 3x3 blocks
NET_LAYOUT = [("top", 1, 0), ("left", 0, 1), ("front", 1, 1), ("right", 2, 1), ("back", 3, 1), ("bottom", 1, 2)]


def render_net(configuration):
    cells = {}
    for face, bx, by in NET_LAYOUT:
        for i, color in enumerate(configuration[face]):
            cells[(by * 3 + i // 3, bx * 3 + i % 3)] = COLOR_HEX[color.value] if color else "#475569"
    html = ['<div class="net">']
    for row in range(9):
        for col in range(12):
            fill = cells.get((row, col))
            style = f"background:{fill};" if fill else ""
            html.append(f'<div class="sq" style="{style}"></div>')
    html.append("</div>")
    return "".join(html)


# Init session state
if "face_input" not in st.session_state:
    st.session_state.face_input = FaceInput()
if "step" not in st.session_state:
    st.session_state.step = "color-input"
if "rng" not in st.session_state:
    st.session_state.rng = random.Random(settings.RANDOM_SEED)
if "solution" not in st.session_state:
    st.session_state.solution = None
if "move_index" not in st.session_state:
    st.session_state.move_index = 0
if "notice" not in st.session_state:
    st.session_state.notice = None

face_input = st.session_state.face_input


def paint_square(index):
    color = st.session_state.get("selected_color", COLORS[0])
    face_input.paint(face_input.current_face, index, color)


def navigate(direction):
    if face_input.advance(direction):
        st.session_state.step = "solving"


def generate_random():
    face_input.load(random_configuration(st.session_state.rng))
    st.session_state.notice = ("success", "A random cube configuration has been created for you to solve.")


def restart():
    face_input.reset()
    st.session_state.solution = None
    st.session_state.move_index = 0
    st.session_state.step = "color-input"


st.markdown("<h1>🧊 Rubik's Cube Solver</h1>", unsafe_allow_html=True)
st.markdown('<div class="card small">Follow the steps to solve your cube: color each face, solve, then view the solution.</div>', unsafe_allow_html=True)

if st.session_state.notice:
    kind, message = st.session_state.notice
    getattr(st, kind)(message)
    st.session_state.notice = None

# --- Step 1: color input
if st.session_state.step == "color-input":
    face = face_input.current_face
    st.subheader(f"Color the {FACE_NAMES[face]}")
    st.button("🔀 Generate Random Cube", on_click=generate_random)

    progress = face_input.progress()
    indicator = []
    for i, name in enumerate(FACES):
        mark = "🔵" if i == face_input.cursor else ("✅" if progress[name] else "⚪")
        indicator.append(f"{mark} {name}")
    st.markdown(" &nbsp; ".join(indicator))

    col_palette, col_grid = st.columns([1, 1])
    with col_palette:
        st.markdown("**Select Color**")
        st.radio(
            "Color",
            COLORS,
            format_func=lambda c: f"{COLOR_EMOJI[c.value]} {c.value}",
            key="selected_color",
            label_visibility="collapsed",
        )

        uploaded = st.file_uploader("...or paint this face from a photo", type=["jpg", "jpeg", "png"], key=f"photo_{face}")
        if uploaded is not None and st.button("Use detected colors"):
            try:
                raw = uploaded.getvalue()
                stickers = detect_face_colors_from_image(decode_image(raw))
                for i, color in enumerate(stickers):
                    face_input.paint(face, i, color)
                st.image(Image.open(BytesIO(raw)).convert("RGB"), caption=" ".join(COLOR_EMOJI[c.value] for c in stickers))
            except Exception as e:
                st.error(f"{uploaded.name}: {e}")

    with col_grid:
        st.markdown(f"**{FACE_NAMES[face]}**")
        slots = face_input.configuration[face]
        for r in range(3):
            cols = st.columns(3)
            for c in range(3):
                i = r * 3 + c
                label = COLOR_EMOJI[slots[i].value] if slots[i] else EMPTY_SQUARE
                cols[c].button(label, key=f"sq_{face}_{i}", on_click=paint_square, args=(i,), use_container_width=True)

    nav_prev, nav_info, nav_next = st.columns([1, 2, 1])
    with nav_prev:
        st.button("← Previous", disabled=face_input.cursor == 0, on_click=navigate, args=(-1,))
    with nav_info:
        st.write(f"Face {face_input.cursor + 1} of {len(FACES)}")
        if face_input.is_all_complete() and not is_valid(face_input.configuration):
            st.caption("Note: each color should appear exactly 9 times on a real cube.")
    with nav_next:
        st.button(
            "Solve Cube" if face_input.is_last_face else "Next →",
            disabled=not face_input.can_advance(),
            on_click=navigate,
            args=(1,),
        )

# --- Step 2: solving
elif st.session_state.step == "solving":
    rng = st.session_state.rng
    with st.spinner("Solving your cube... calculating the optimal solution"):
        time.sleep(settings.SOLVE_DELAY_MIN + rng.random() * settings.SOLVE_DELAY_SPREAD)
        try:
            solution = solve(face_input.configuration, rng, retry_rejected=settings.SOLVER_RETRY_REJECTED)
        except Exception as e:
            solution = None
            st.session_state.notice = ("error", f"Failed to solve the cube. Please check your configuration. ({e})")
            st.session_state.step = "color-input"

    if solution is not None:
        st.session_state.solution = solution
        st.session_state.move_index = 0
        st.session_state.step = "solution"
        st.session_state.notice = ("success", f"Solution found! Solved in {solution.total_moves} moves.")
    st.rerun()

# --- Step 3: solution
elif st.session_state.step == "solution":
    solution = st.session_state.solution
    st.subheader("Solution Complete!")

    stat_moves, stat_time = st.columns(2)
    stat_moves.metric("Total Moves", solution.total_moves)
    stat_time.metric("Solving Time", f"{solution.solving_time:.1f}s")

    col_steps, col_cube = st.columns([2, 1])
    with col_steps:
        if solution.moves:
            prev_col, mid_col, next_col = st.columns([1, 2, 1])
            with prev_col:
                if st.button("Prev", key="prev_btn") and st.session_state.move_index > 0:
                    st.session_state.move_index -= 1
            with next_col:
                if st.button("Next", key="next_btn") and st.session_state.move_index < len(solution.moves) - 1:
                    st.session_state.move_index += 1
            with mid_col:
                move = solution.moves[st.session_state.move_index]
                st.write(f"Step {st.session_state.move_index + 1} / {len(solution.moves)}")
                st.markdown(f"### {move}: {describe_move(move)}")

        st.markdown("**Step-by-Step Solution:**")
        st.markdown("\n".join(
            f"{i + 1}. `{move}` {describe_move(move)}" for i, move in enumerate(solution.moves)
        ))

    with col_cube:
        st.markdown("**Solved Cube**")
        st.markdown(render_net(solved_configuration()), unsafe_allow_html=True)
        st.button("🔄 Solve Another Cube", on_click=restart)
        st.download_button(
            "⬇️ Export Solution",
            data=export_solution(solution),
            file_name=export_filename(),
            mime="application/json",
        )
