"""User-section capture and merge.

Hand-written code in a generated file lives between marker comments:
    /* USER CODE BEGIN Includes */
    #include <foo.h>
    /* USER CODE END Includes */

Each generation pass registers the sections it will emit, captures the
bodies found in the previous output, and writes every section back with
its captured body (or the registered default) between the same markers.
Anything outside the markers is regenerated.
"""

# Marker keywords used by the marker formatter and the capturer
MARKER_PREFIX = "USER CODE"
BEGIN_KEYWORD = "BEGIN"
END_KEYWORD = "END"
