"""Thin wrapper to build the static story page using the scrolly_builder package."""

from scrolly_builder.main import build_site


if __name__ == "__main__":
    # Refresh trend plots before generating the site
    try:
        import plot_region_trends
        plot_region_trends.main()
    except Exception as e:
        print(f"Warning: trend plots not generated: {e}")
    build_site()
