import customtkinter as ctk

from dataset_viewer.config.settings import ViewerSettings
from dataset_viewer.controllers.app_controller import AppController
from dataset_viewer.services.analysis_service import AnalysisService
from dataset_viewer.services.dataset_service import DatasetService
from dataset_viewer.services.mean_service import MeanService
from dataset_viewer.ui.bottom_bar import BottomBar
from dataset_viewer.ui.color_view import ColorView
from dataset_viewer.ui.image_viewer import ImageViewer
from dataset_viewer.ui.sidebar import Sidebar


class DatasetViewerApp(ctk.CTk):
    def __init__(self, settings: ViewerSettings = ViewerSettings()) -> None:
        super().__init__()
        ctk.set_appearance_mode(settings.appearance_mode)
        ctk.set_default_color_theme(settings.color_theme)

        self.title("Dataset Viewer")
        self.minsize(1000, 640)

        # root layout: mean image | mean color | sidebar
        self.grid_columnconfigure(0, weight=2)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._color_view = ColorView(self)
        self._color_view.grid(row=0, column=1, sticky="nsew", padx=6, pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=2, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=3, sticky="ew", padx=12, pady=(0, 12))

        mean_service = MeanService(
            mean_color_mode=settings.mean_color_mode,
            require_equal_dimensions=settings.require_equal_dimensions,
        )
        self._controller = AppController(
            viewer=self._viewer,
            color_view=self._color_view,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            dataset_service=DatasetService(
                extensions=settings.extensions,
                separator=settings.category_separator,
                all_category=settings.all_category,
            ),
            analysis_service=AnalysisService(mean_service=mean_service),
        )
        self._controller.bind_events()

    @property
    def controller(self) -> AppController:
        return self._controller
