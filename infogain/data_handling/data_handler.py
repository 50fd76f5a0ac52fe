# A module to ensure label and weight vectors are prepared consistently before scoring.
from typing import Union
import pandas as pd
import numpy as np
from sklearn.preprocessing import LabelEncoder
import logging

from infogain.criterion import information_gain


class LabelHandler:

    def __init__(self,
                 mode: str = "unweighted",
                 checked: bool = False,
                 debug: bool = False,
                 log_file: Union[None, str] = None):

        self.debug = debug

        if self.debug:
            logging_level = logging.DEBUG
        else:
            logging_level = logging.INFO
        logging.basicConfig(
            filename=log_file,
            level=logging_level,
            format='%(asctime)s %(levelname)s %(message)s')

        valid = ["unweighted", "weighted"]
        if mode not in valid:
            raise ValueError(f"mode must be one of {valid}, got '{mode}'")
        self.mode = mode
        self.checked = checked

        if checked:
            self.evaluate_function = information_gain.evaluate_checked
        else:
            self.evaluate_function = information_gain.evaluate

        self.data = None
        self.label_encoder = None

    @property
    def use_weights(self) -> bool:
        return self.mode == "weighted"

    @property
    def num_classes(self) -> int:
        if self.label_encoder is None:
            raise ValueError("Labels have not been encoded yet, call encode_label first")
        return len(self.label_encoder.classes_)

    def encode_label(self, label: str, data: pd.DataFrame) -> LabelEncoder:

        if label not in data.columns:
            raise KeyError(f"Label column '{label}' not in data")

        # work on a copy, the caller's frame is left untouched
        data = data.copy()
        lab_enc = LabelEncoder()
        data[label] = lab_enc.fit_transform(data[label])
        self.data = data
        self.label_encoder = lab_enc

        logging.info(f"Encoded label '{label}' into {len(lab_enc.classes_)} classes")

        return lab_enc

    def get_column(self,
                   column: str,
                   rows: Union[None, pd.Series, np.ndarray] = None,
                   data=None) -> np.ndarray:

        if data is None:
            data = self.data
        if data is None:
            raise ValueError("No data available, call encode_label first")
        if column not in data.columns:
            raise KeyError(f"Column '{column}' not in data")

        if rows is None:
            return data[column].to_numpy()
        else:
            return data.loc[rows, column].to_numpy()

    def get_labels(self,
                   label: str,
                   rows: Union[None, pd.Series, np.ndarray] = None,
                   data=None) -> np.ndarray:
        return self.get_column(label, rows=rows, data=data).astype(np.intp)

    def get_weights(self,
                    weight: str,
                    rows: Union[None, pd.Series, np.ndarray] = None,
                    data=None) -> np.ndarray:
        return self.get_column(weight, rows=rows, data=data).astype(float)

    def node_gain(self,
                  label: str,
                  weight: Union[None, str] = None,
                  rows: Union[None, pd.Series, np.ndarray] = None) -> float:

        labels = self.get_labels(label, rows=rows)

        if self.use_weights:
            if weight is None:
                raise ValueError("A weight column is required in weighted mode")
            weights = self.get_weights(weight, rows=rows)
        else:
            if weight is not None:
                logging.warning(f"Ignoring weight column '{weight}' in unweighted mode")
            weights = None

        logging.debug(f"Computing {self.mode} information gain over {labels.size} points")

        return self.evaluate_function(labels, self.num_classes, weights=weights, use_weights=self.use_weights)

    def gain_range(self) -> float:
        return information_gain.gain_range(self.num_classes)
