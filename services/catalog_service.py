"""Catalog service for loading disposal centers from an API, a CSV file, or built-in data."""
import re
import requests
import pandas as pd
from typing import List, Optional, Tuple
from loguru import logger
from configurations.config import Config
from configurations.disposal_centers import DEFAULT_DISPOSAL_CENTERS
from core.errors import ValidationError
from models.disposal_center import DisposalCenter

_LIST_SEPARATORS = re.compile(r"[;,|]")


class CenterCatalogService:
    def __init__(self, api_url: Optional[str] = None, csv_path: Optional[str] = None,
                 token: Optional[str] = None, timeout: Optional[int] = None):
        self.api_url = Config.CATALOG_API_URL if api_url is None else api_url
        self.csv_path = Config.CATALOG_CSV_PATH if csv_path is None else csv_path
        self.token = Config.CATALOG_API_TOKEN if token is None else token
        self.timeout = timeout or Config.CATALOG_API_TIMEOUT_SECONDS

        logger.info(f"CenterCatalogService initialized (api: {self.api_url or '-'}, csv: {self.csv_path or '-'})")

    def load_centers(self) -> Tuple[DisposalCenter, ...]:
        """Load the catalog from the first configured source that yields centers."""
        if self.api_url:
            centers = self._fetch_from_api()
            if centers:
                return centers
        if self.csv_path:
            centers = self._read_from_csv()
            if centers:
                return centers
        return self._create_fallback_centers()

    def _fetch_from_api(self) -> Tuple[DisposalCenter, ...]:
        try:
            headers = {'accept': 'application/json'}
            if self.token:
                headers['Authorization'] = f'Bearer {self.token}'
            else:
                logger.warning("No bearer token available for catalog API")

            logger.info(f"Fetching disposal centers from: {self.api_url}")
            response = requests.get(self.api_url, headers=headers, timeout=self.timeout)

            if response.status_code == 200:
                centers = self._process_catalog_data(response.json())
                logger.success(f"Fetched {len(centers)} disposal centers from API")
                return centers
            logger.error(f"Catalog API returned status {response.status_code}: {response.text[:200]}")
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching disposal centers: {e}")
        return ()

    def _read_from_csv(self) -> Tuple[DisposalCenter, ...]:
        try:
            df = pd.read_csv(self.csv_path, dtype=str)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading catalog CSV {self.csv_path}: {e}")
            return ()
        centers = self._dataframe_to_centers(df)
        logger.success(f"Loaded {len(centers)} disposal centers from {self.csv_path}")
        return centers

    def _process_catalog_data(self, catalog_data) -> Tuple[DisposalCenter, ...]:
        """Process a catalog API payload; handles bare lists and wrapped responses."""
        if isinstance(catalog_data, list):
            records = catalog_data
        elif isinstance(catalog_data, dict):
            for wrapper in ('content', 'data', 'centers', 'disposalCenters'):
                if isinstance(catalog_data.get(wrapper), list):
                    records = catalog_data[wrapper]
                    break
            else:
                records = [catalog_data]
        else:
            logger.warning(f"Unexpected catalog payload type: {type(catalog_data).__name__}")
            return ()
        return self._dataframe_to_centers(pd.DataFrame(records))

    def _standardize_catalog_data(self, df: pd.DataFrame) -> pd.DataFrame:
        """Standardize catalog column names."""
        column_mappings = {
            'centerId': 'id',
            'center_id': 'id',
            'centerName': 'name',
            'lat': 'latitude',
            'lng': 'longitude',
            'lon': 'longitude',
            'acceptedWaste': 'accepted_waste_types',
            'acceptedWasteTypes': 'accepted_waste_types',
            'accepted_waste': 'accepted_waste_types',
            'operatingHours': 'hours',
        }
        df = df.rename(columns={old: new for old, new in column_mappings.items() if old in df.columns})

        if 'id' not in df.columns:
            df['id'] = [str(i + 1) for i in range(len(df))]
        for col, default in (('name', ''), ('address', ''), ('hours', ''), ('rating', 0.0)):
            if col not in df.columns:
                df[col] = default
        return df

    def _dataframe_to_centers(self, df: pd.DataFrame) -> Tuple[DisposalCenter, ...]:
        df = self._standardize_catalog_data(df)
        missing = [col for col in ('latitude', 'longitude', 'accepted_waste_types') if col not in df.columns]
        if missing:
            logger.error(f"Catalog is missing required columns: {missing}")
            return ()

        centers: List[DisposalCenter] = []
        for idx, row in df.iterrows():
            try:
                centers.append(DisposalCenter.create(
                    id=str(row['id']),
                    name=self._text(row['name']),
                    address=self._text(row['address']),
                    latitude=float(row['latitude']),
                    longitude=float(row['longitude']),
                    accepted_waste_types=self._split_waste_types(row['accepted_waste_types']),
                    hours=self._text(row['hours']),
                    rating=0.0 if pd.isna(row['rating']) else float(row['rating']),
                ))
            except (ValidationError, TypeError, ValueError) as e:
                logger.warning(f"Skipping catalog row {idx}: {e}")
        return tuple(centers)

    @staticmethod
    def _text(value) -> str:
        if value is None or (isinstance(value, float) and pd.isna(value)):
            return ''
        return str(value)

    @staticmethod
    def _split_waste_types(value) -> List[str]:
        if isinstance(value, (list, tuple, set, frozenset)):
            return [str(v) for v in value]
        if value is None or (isinstance(value, float) and pd.isna(value)):
            return []
        return [part for part in _LIST_SEPARATORS.split(str(value)) if part.strip()]

    def _create_fallback_centers(self) -> Tuple[DisposalCenter, ...]:
        """Build the built-in catalog when no external source is available."""
        logger.warning("Using built-in disposal center catalog")
        return tuple(DisposalCenter.create(**record) for record in DEFAULT_DISPOSAL_CENTERS)