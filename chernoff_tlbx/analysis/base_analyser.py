"""Base class for the fit/result preparation stages."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for preparation stages in the face pipeline.

    All stages must:
    1. Receive their input (a DataFrame or a column classification) in the constructor
    2. Implement fit() to perform the computation and return self for chaining
    3. Implement result() to return a frozen dataclass with the outputs

    A stage either fully succeeds in ``fit()`` or raises; ``result()`` never
    returns a partially computed artifact.


    ---


    ### Adding a New Stage

    ```python
    from dataclasses import dataclass

    @dataclass(frozen=True)
    class MyStageResult:
        '''Results package for MyStage.'''
        features: pd.DataFrame

    class MyStage(BaseAnalyser):
        def __init__(self, features: pd.DataFrame):
            self._features = features
            self._result: MyStageResult | None = None

        def fit(self) -> "MyStage":
            self._result = MyStageResult(features=self._features.copy())
            return self

        def result(self) -> MyStageResult:
            if self._result is None:
                raise ValueError("Must call fit() before result()")
            return self._result
    ```

    **Key principles:**

    - Never mutate the input frame; derive a new one
    - Keep the original row index so rows can be re-associated with labels
    """

    @abstractmethod
    def fit(self, *args: Any, **kwargs: Any) -> "BaseAnalyser":
        """Run the stage.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return the stage output as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
