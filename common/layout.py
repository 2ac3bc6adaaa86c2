"""
common/layout.py

Shared layout helpers for PMS pages.

Every page is drawn inside the same thin header strip (breadcrumb, title,
owner, last-updated, data source). The strip embeds its own CSS, so no
external style.css is needed.
"""

from typing import Callable, List, Optional

import streamlit as st

HEADER_CSS = """
<style>
    div.block-container {
        padding-top: 1.8rem !important;
    }
    .pms-header {
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding: 0.3rem 1.25rem;
        background-image: linear-gradient(90deg, #1a3d7c, #4B9FFF);
        border-radius: 10px;
        box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1);
        margin-bottom: 1.5rem;
    }
    .pms-header-left {
        display: flex;
        align-items: center;
        gap: 0.75rem;
        color: white;
    }
    .pms-header-left h2 {
        font-size: 1.1rem;
        font-weight: 500;
        margin: 0;
        padding: 0;
        line-height: 1;
        color: white;
    }
    .pms-breadcrumb {
        font-size: 0.75rem;
        color: #dde7ff;
    }
    .pms-badge {
        padding: 0.2rem 0.5rem;
        border-radius: 4px;
        font-size: 0.7rem;
        font-weight: 700;
        line-height: 1.0;
        background-color: #FFC107;
        color: #333;
    }
    .pms-header-right {
        display: flex;
        gap: 1.25rem;
        font-size: 0.8rem;
        color: #eee;
    }
    .pms-meta-item {
        line-height: 1;
        white-space: nowrap;
    }
    .pms-meta-item strong {
        font-weight: 600;
        color: #cfd8ea;
    }
</style>
"""


def render_frame(
    title_override: str,
    body_component: Optional[Callable],
    user: dict,
    breadcrumb: Optional[List[str]] = None,
    last_updated: str = "N/A",
    owner: str = "TBD",
    data_source: str = "N/A",
    coming_soon: bool = False,
) -> None:
    """
    Render the PMS header strip for the current page, then the page body.
    """

    crumbs = " › ".join(breadcrumb or [])
    coming_soon_tag = '<span class="pms-badge">⚠ Coming Soon</span>' if coming_soon else ""

    header_html = f"""
<div class="pms-header">
<div class="pms-header-left">
<div>
<div class="pms-breadcrumb">{crumbs}</div>
<h2>{title_override}</h2>
</div>
{coming_soon_tag}
</div>
<div class="pms-header-right">
<div class="pms-meta-item"><strong>Owner:</strong> {owner}</div>
<div class="pms-meta-item"><strong>Updated:</strong> {last_updated}</div>
<div class="pms-meta-item"><strong>Source:</strong> {data_source}</div>
</div>
</div>
"""

    st.markdown(HEADER_CSS, unsafe_allow_html=True)
    st.markdown(header_html, unsafe_allow_html=True)

    if coming_soon:
        st.info(
            f"{title_override} has a place in the menu, "
            "but the page itself is still being built."
        )
        return

    if body_component:
        body_component(user=user)
    else:
        st.error(
            f"**Page Rendering Error:** The page '{title_override}' is not marked "
            "'Coming Soon' but did not provide a valid body component to render."
        )


def render_jump_links(links: List[dict], key_prefix: str) -> None:
    """
    Row of buttons that switch the active menu, e.g. dashboard quick
    links. Each link is {"id": menu_id, "label": text}.
    """
    if not links:
        return
    cols = st.columns(min(len(links), 4))
    for i, link in enumerate(links):
        if cols[i % len(cols)].button(link["label"], key=f"{key_prefix}::{link['id']}", use_container_width=True):
            st.session_state["active_menu"] = link["id"]
            st.rerun()
