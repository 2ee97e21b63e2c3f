import datetime

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from FrontEnd.styles.design_tokens import COLORS

class WeekChart(FigureCanvas):
	"""Bar chart of study minutes for each day of one week."""
	def __init__(self):
		self.figure = Figure(figsize=(5, 2.5))
		super().__init__(self.figure)

	def plot(self, series):
		# series: [(YYYY-MM-DD, minutes), ...] Monday first
		x = [datetime.date.fromisoformat(day).strftime("%a") for day, _ in series]
		y = [minutes / 60 for _, minutes in series]

		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		ax.set_facecolor('#F7FAFC')

		bars = ax.bar(x, y, color=COLORS['chart_bar'], edgecolor=COLORS['chart_edge'], linewidth=1.5, alpha=0.9)
		for bar, value in zip(bars, y):
			if value > 0:
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height() + 0.05,
				       f'{value:.1f}h', ha='center', va='bottom',
				       fontsize=9, fontweight='600', color=COLORS['text_strong'])

		ax.set_ylabel("Hours Studied", fontsize=11, fontweight='600', color=COLORS['text_strong'])
		ax.set_ylim(bottom=0)
		ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8, color=COLORS['chart_grid'])
		ax.set_axisbelow(True)
		ax.tick_params(axis='both', colors=COLORS['text_strong'], labelsize=10)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		for spine in ['bottom', 'left']:
			ax.spines[spine].set_color(COLORS['chart_grid'])

		self.figure.tight_layout()
		self.draw()
