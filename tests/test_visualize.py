"""Tests for visualization utilities."""

from dataclasses import replace

import matplotlib
import pytest

# Use non-interactive backend for testing
matplotlib.use("Agg")

import matplotlib.pyplot as plt

from spray_planner.catalog import NozzleCatalog
from spray_planner.errors import NozzleNotFoundError
from spray_planner.models import ApplicationConfig, AreaSpec
from spray_planner.visualize import plot_nozzle_comparison, plot_pressure_curve


@pytest.fixture
def config():
    """Reference application config."""
    return ApplicationConfig(
        nozzle_id="teejet-aixr11004",
        spray_volume_l_ha=300.0,
        nozzle_spacing_m=0.5,
        nozzle_count=24,
        speed_km_h=6.0,
        tank_size_l=600.0,
        areas=(AreaSpec(size_ha=2.0),),
    )


class TestPlotPressureCurve:
    """Test plot_pressure_curve function."""

    def test_creates_figure(self, config):
        """Test that a figure with one axes is returned."""
        fig = plot_pressure_curve(config, show=False)
        assert isinstance(fig, plt.Figure)
        assert len(fig.axes) == 1
        plt.close(fig)

    def test_default_title_names_nozzle(self, config):
        """Test that the auto title mentions the nozzle."""
        fig = plot_pressure_curve(config, show=False)
        assert "TeeJet AIXR11004" in fig._suptitle.get_text()
        plt.close(fig)

    def test_custom_title(self, config):
        """Test custom title."""
        fig = plot_pressure_curve(config, title="My Title", show=False)
        assert "My Title" in fig._suptitle.get_text()
        plt.close(fig)

    def test_custom_speeds(self, config):
        """Test that the curve follows the given speeds."""
        fig = plot_pressure_curve(config, speeds=[3.0, 6.0, 9.0], show=False)
        curve = fig.axes[0].lines[0]
        assert list(curve.get_xdata()) == [3.0, 6.0, 9.0]
        plt.close(fig)

    def test_empty_speeds_raises_error(self, config):
        """Test that an empty speed range raises error."""
        with pytest.raises(ValueError, match="Cannot plot empty speed range"):
            plot_pressure_curve(config, speeds=[], show=False)

    def test_unknown_nozzle_raises_error(self, config):
        """Test that an unknown nozzle raises error."""
        with pytest.raises(NozzleNotFoundError):
            plot_pressure_curve(replace(config, nozzle_id="nope"), show=False)

    def test_save_to_file(self, config, tmp_path):
        """Test saving plot to file."""
        save_path = tmp_path / "pressure.png"
        fig = plot_pressure_curve(config, show=False, save_path=str(save_path))
        assert save_path.exists()
        plt.close(fig)


class TestPlotNozzleComparison:
    """Test plot_nozzle_comparison function."""

    def test_one_bar_per_nozzle(self, config):
        """Test that each catalog nozzle gets a bar."""
        fig = plot_nozzle_comparison(config, show=False)
        assert len(fig.axes[0].patches) == len(NozzleCatalog.default())
        plt.close(fig)

    def test_tick_labels(self, config):
        """Test that bars are labeled with nozzle labels."""
        fig = plot_nozzle_comparison(config, show=False)
        labels = [tick.get_text() for tick in fig.axes[0].get_xticklabels()]
        assert labels == [nozzle.label for nozzle in NozzleCatalog.default().values()]
        plt.close(fig)

    def test_empty_catalog_raises_error(self, config):
        """Test that an empty catalog raises error."""
        with pytest.raises(ValueError, match="Cannot plot empty nozzle catalog"):
            plot_nozzle_comparison(config, catalog=NozzleCatalog([]), show=False)

    def test_save_to_file(self, config, tmp_path):
        """Test saving plot to file."""
        save_path = tmp_path / "nozzles.png"
        fig = plot_nozzle_comparison(config, show=False, save_path=str(save_path))
        assert save_path.exists()
        plt.close(fig)
