"""Desktop window for loading demography data and viewing a region's statistics."""

from __future__ import annotations

import argparse
from typing import Any, Iterable

from .context import Context
from .errors import DemographyError
from .graph import HEIGHT, WIDTH, draw_graph
from .records import MAX_REGION_LENGTH, DemographyRecord
from .statistics import FIRST_COLUMN, LAST_COLUMN

TABLE_HEADERS = (
    "Year",
    "Region",
    "Nat. Pop. Growth",
    "Birth Rate",
    "Death Rate",
    "Dem. Weight",
    "Urbanization",
)

WINDOW_TITLE = "Demography statistics"


def _format_number(value: float) -> str:
    return f"{value:g}"


def table_rows(records: Iterable[DemographyRecord], region: str | None = "") -> list[tuple[str, ...]]:
    """Return the table cells of the valid records, limited to ``region`` unless it is empty."""
    return [
        (
            str(record.year),
            record.region,
            _format_number(record.natural_population_growth),
            _format_number(record.birth_rate),
            _format_number(record.death_rate),
            _format_number(record.general_demographic_weight),
            _format_number(record.urbanization),
        )
        for record in records
        if record.valid and (not region or record.region == region)
    ]


def format_load_summary(context: Context) -> str:
    """Return the message describing the row counts of the last load."""
    return (
        f"Total rows: {context.total_rows}\n"
        f"Valid rows: {context.valid_rows}\n"
        f"Error rows: {context.error_rows}"
    )


class MainWindow:
    """The main window: file selection, data table, statistics and graph."""

    def __init__(self, root: Any) -> None:
        import tkinter as tk
        from tkinter import filedialog, messagebox, ttk

        self._filedialog = filedialog
        self._messagebox = messagebox
        self.root = root
        self.context = Context()
        self.filename = ""

        root.title(WINDOW_TITLE)

        controls = ttk.Frame(root, padding=6)
        controls.pack(side=tk.TOP, fill=tk.X)

        self.file_path = tk.StringVar()
        ttk.Label(controls, text="File:").grid(row=0, column=0, sticky="w")
        ttk.Entry(controls, textvariable=self.file_path, state="readonly", width=50).grid(
            row=0, column=1, columnspan=3, sticky="ew"
        )
        ttk.Button(controls, text="Open file", command=self.open_file).grid(row=0, column=4)
        ttk.Button(controls, text="Load data", command=self.load_data).grid(row=0, column=5)

        self.region = tk.StringVar()
        ttk.Label(controls, text="Region:").grid(row=1, column=0, sticky="w")
        ttk.Entry(controls, textvariable=self.region, width=30).grid(row=1, column=1, sticky="ew")

        self.column = tk.IntVar(value=FIRST_COLUMN)
        ttk.Label(controls, text="Column:").grid(row=1, column=2, sticky="e")
        ttk.Spinbox(
            controls, from_=FIRST_COLUMN, to=LAST_COLUMN, textvariable=self.column, width=5
        ).grid(row=1, column=3, sticky="w")
        ttk.Button(controls, text="Calculate", command=self.calculate).grid(row=1, column=4)

        self.min_value = tk.StringVar()
        self.max_value = tk.StringVar()
        self.median_value = tk.StringVar()
        for index, (label, variable) in enumerate(
            (("Min:", self.min_value), ("Max:", self.max_value), ("Median:", self.median_value))
        ):
            ttk.Label(controls, text=label).grid(row=2, column=index * 2, sticky="e")
            ttk.Entry(controls, textvariable=variable, state="readonly", width=14).grid(
                row=2, column=index * 2 + 1, sticky="w"
            )
        controls.columnconfigure(1, weight=1)

        body = ttk.Panedwindow(root, orient=tk.HORIZONTAL)
        body.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        table_frame = ttk.Frame(body)
        self.table = ttk.Treeview(table_frame, columns=TABLE_HEADERS, show="headings")
        for header in TABLE_HEADERS:
            self.table.heading(header, text=header)
            self.table.column(header, width=90, anchor="e")
        scrollbar = ttk.Scrollbar(table_frame, orient=tk.VERTICAL, command=self.table.yview)
        self.table.configure(yscrollcommand=scrollbar.set)
        self.table.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        body.add(table_frame, weight=1)

        self.canvas = tk.Canvas(body, width=WIDTH, height=HEIGHT, highlightthickness=0)
        body.add(self.canvas, weight=1)
        self.canvas.bind("<Configure>", lambda _event: self._redraw_graph())

    def _redraw_graph(self) -> None:
        width = max(self.canvas.winfo_width(), WIDTH)
        height = max(self.canvas.winfo_height(), HEIGHT)
        self.canvas.delete("all")
        draw_graph(self.canvas, self.context.series, self.context.summary, width, height)

    def open_file(self) -> None:
        """Ask for a CSV file and remember its path."""
        chosen = self._filedialog.askopenfilename(
            parent=self.root,
            title="Open CSV File",
            filetypes=[("CSV Files", "*.csv")],
        )
        if chosen:
            self.filename = chosen
            self.file_path.set(chosen)

    def load_data(self) -> None:
        """Load the chosen file into the context and show its rows."""
        if not self.filename:
            self._messagebox.showwarning(
                "Warning", "Please select a CSV file first.", parent=self.root
            )
            return
        try:
            self.context.load_data(self.filename)
        except DemographyError:
            self._messagebox.showerror(
                "Error",
                f"Error loading data: {self.context.error_message} {self.filename}",
                parent=self.root,
            )
            return
        self._messagebox.showinfo(
            "Information", format_load_summary(self.context), parent=self.root
        )
        self.display_data(self.region.get())

    def display_data(self, region: str = "") -> None:
        """Fill the table with the valid rows, limited to ``region`` unless it is empty."""
        self.table.delete(*self.table.get_children())
        for row in table_rows(self.context.records, region):
            self.table.insert("", "end", values=row)

    def calculate(self) -> None:
        """Compute statistics for the chosen region and column and redraw the graph."""
        if not self.filename:
            self._messagebox.showwarning(
                "Warning", "Please select a CSV file first.", parent=self.root
            )
            return
        region = self.region.get()[: MAX_REGION_LENGTH - 1]
        try:
            column = int(self.column.get())
        except (ValueError, TypeError):
            column = 0
        try:
            summary = self.context.calculate_stats(region, column)
        except DemographyError:
            self._messagebox.showerror(
                "Error",
                f"Error calculating statistics: {self.context.error_message}",
                parent=self.root,
            )
        else:
            self.min_value.set(_format_number(summary.min))
            self.max_value.set(_format_number(summary.max))
            self.median_value.set(_format_number(summary.median))
        self._redraw_graph()


def main(argv: list[str] | None = None) -> int:
    """Open the main window and run until it is closed."""
    argparse.ArgumentParser(
        prog="demostats", description="View statistics of demography data."
    ).parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())