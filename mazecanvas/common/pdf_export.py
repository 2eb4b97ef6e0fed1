from typing import List, Dict
from pathlib import Path
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import cm


def export_summary_pdf(output_path: str, title: str, summary: Dict, image_paths: List[str] | None = None):
    p = canvas.Canvas(output_path, pagesize=A4)
    width, height = A4
    p.setFont("Helvetica-Bold", 16)
    p.drawString(2*cm, height-2*cm, title)
    p.setFont("Helvetica", 11)
    y = height - 3*cm
    settings = summary.get('settings') or {}
    if settings:
        p.drawString(2*cm, y, ", ".join(f"{k}={v}" for k, v in settings.items()))
        y -= 0.8*cm
    items = summary.get('items') or []
    p.drawString(2*cm, y, f"Mazes: {len(items)}")
    y -= 0.8*cm
    for i, it in enumerate(items):
        s = it.get('stats', {})
        p.drawString(2*cm, y, f"[{i}] {it.get('width')}x{it.get('height')} attempts={it.get('attempts')} "
                              f"edges={s.get('open_edges')} dead_ends={s.get('dead_ends')} rooms={s.get('open_rooms')}")
        y -= 0.6*cm
        if y < 4*cm:
            p.showPage()
            p.setFont("Helvetica", 11)
            y = height - 3*cm
    # One maze per page after the table
    for img in image_paths or []:
        if img and Path(img).exists():
            p.showPage()
            p.setFont("Helvetica", 11)
            p.drawString(2*cm, height-2*cm, Path(img).name)
            p.drawImage(img, 2*cm, 4*cm, width=16*cm, height=height-7*cm, preserveAspectRatio=True, mask='auto')
    p.save()
