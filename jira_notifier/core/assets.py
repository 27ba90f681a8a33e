"""Bundled image assets."""

# 48x48 PNG of the Jira logo, used when a payload carries no avatar or issue-type icon
DEFAULT_JIRA_ICON = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAADAAAAAwCAYAAABXAvmHAAAACXBIWXMAAAsTAAALEw"
    "EAmpwYAAAF8WlUWHRYTUw6Y29tLmFkb2JlLnhtcAAAAAAAPD94cGFja2V0IGJlZ2luPSLvu78iIGlkPSJXNU0wTX"
    "BDZWhpSHpyZVN6TlRjemtjOWQiPz4gPHg6eG1wbWV0YSB4bWxuczp4PSJhZG9iZTpuczptZXRhLyIgeDp4bXB0az"
    "0iQWRvYmUgWE1QIENvcmUgNy4yLWMwMDAgNzkuMWI2NWE3OWI0LCAyMDIyLzA2LzEzLTIyOjAxOjAxICAgICAgIC"
    "AiPiA8cmRmOlJERiB4bWxuczpyZGY9Imh0dHA6Ly93d3cudzMub3JnLzE5OTkvMDIvMjItcmRmLXN5bnRheC1ucy"
    "MiPiA8cmRmOkRlc2NyaXB0aW9uIHJkZjphYm91dD0iIiB4bWxuczp4bXA9Imh0dHA6Ly9ucy5hZG9iZS5jb20veG"
    "FwLzEuMC8iIHhtbG5zOnhtcE1NPSJodHRwOi8vbnMuYWRvYmUuY29tL3hhcC8xLjAvbW0vIiB4bWxuczpzdEV2dD"
    "0iaHR0cDovL25zLmFkb2JlLmNvbS94YXAvMS4wL3NUeXBlL1Jlc291cmNlRXZlbnQjIiB4bWxuczpkYz0iaHR0cD"
    "ovL3B1cmwub3JnL2RjL2VsZW1lbnRzLzEuMS8iIHhtbG5zOnBob3Rvc2hvcD0iaHR0cDovL25zLmFkb2JlLmNvbS"
    "9waG90b3Nob3AvMS4wLyIgeG1wOkNyZWF0b3JUb29sPSJBZG9iZSBQaG90b3Nob3AgMjQuMCAoTWFjaW50b3NoKS"
    "IgeG1wOkNyZWF0ZURhdGU9IjIwMjQtMDMtMjdUMTU6NDc6NDctMDQ6MDAiIHhtcDpNZXRhZGF0YURhdGU9IjIwMj"
    "QtMDMtMjdUMTU6NDc6NDctMDQ6MDAiIHhtcDpNb2RpZnlEYXRlPSIyMDI0LTAzLTI3VDE1OjQ3OjQ3LTA0OjAwIi"
    "B4bXBNTTpJbnN0YW5jZUlEPSJ4bXAuaWlkOjY5ZTI5ZjAwLTRlZDAtNDI0ZC1hMzBkLTNlOGNmYjdiODVhYyIgeG"
    "1wTU06RG9jdW1lbnRJRD0iYWRvYmU6ZG9jaWQ6cGhvdG9zaG9wOjY5ZTI5ZjAwLTRlZDAtNDI0ZC1hMzBkLTNlOG"
    "NmYjdiODVhYyIgeG1wTU06T3JpZ2luYWxEb2N1bWVudElEPSJ4bXAuZGlkOjY5ZTI5ZjAwLTRlZDAtNDI0ZC1hMz"
    "BkLTNlOGNmYjdiODVhYyIgZGM6Zm9ybWF0PSJpbWFnZS9wbmciIHBob3Rvc2hvcDpDb2xvck1vZGU9IjMiPiA8eG"
    "1wTU06SGlzdG9yeT4gPHJkZjpTZXE+IDxyZGY6bGkgc3RFdnQ6YWN0aW9uPSJjcmVhdGVkIiBzdEV2dDppbnN0YW"
    "5jZUlEPSJ4bXAuaWlkOjY5ZTI5ZjAwLTRlZDAtNDI0ZC1hMzBkLTNlOGNmYjdiODVhYyIgc3RFdnQ6d2hlbj0iMj"
    "AyNC0wMy0yN1QxNTo0Nzo0Ny0wNDowMCIgc3RFdnQ6c29mdHdhcmVBZ2VudD0iQWRvYmUgUGhvdG9zaG9wIDI0Lj"
    "AgKE1hY2ludG9zaCkiLz4gPC9yZGY6U2VxPiA8L3htcE1NOkhpc3Rvcnk+IDwvcmRmOkRlc2NyaXB0aW9uPiA8L3"
    "JkZjpSREY+IDwveDp4bXBtZXRhPiA8P3hwYWNrZXQgZW5kPSJyIj8+B7PNWgAABKhJREFUaIHtmVtsFFUYx3/nzM"
    "7s7M7uQnfbpVDaAgVKL4C0gNxEUVBDxBJI1AQTEzHGxMQHE0x88MGYGBMfNPHJxGh8wHgJxkQgBIUYCwpYCwXayk"
    "3acqml233Y3dmZOccHKaVQ2i47u1vj/l52Zs75f+f7ne+cOWfOCCklM4lQFGHPtGYAMVMBhKIIe8YDzHQPTDuAUB"
    "RhW5YlbQBCUYRtWZYUQhiWZUkppQVYpmnaGa0UQhimaUohhBFWVXWkBxRF2LquSyGEEQ6H1bEAM1IpQlGEbVmWFE"
    "IYsVhMHeshz/OMBBBCGMPDw1II0QUQiUTUMQAzTilCUYRt27YUQhiJREKNx+NqOBxWwzNNKUJRhG1ZlhRCGMlkUo"
    "3H42o0GlWFoghbSikBK51O/6OU0gZQVVUVQlGEbZqmBKxMJvOLaZrStm0LQFVV1bYsS6bT6Z+llBZAZWVlCEBMp1"
    "KEoghb13UphDDy+bwai8XUaDSqKoqwLcuS2Wz2uJTSBKisrAwJIQzTNGU+n/9RSmnrul4AqKioCE2nUoSiCNswDC"
    "mEMPL5vBqPx9VIJKJ6lZLNZk9IKQ2A8vLykGVZMpfLnTRNU+q6XgAoKysLCSEM0zRlLpc7ZVmW1HW9AFBaWhoSQh"
    "iGYchcLnfatm2p63oBQFVVVQhh5PP5M7ZtS13XC16lZDKZs1JKHaC4uDjkVYphGFLX9QJASUlJyKsUXdcLRUVFIa"
    "9S0un0D1JKDaCoqCjkVYqmaQWvUtLp9I+2bUtN0woAqqqqQgjDMAyZyWTOSymzAMXFxSEhhGEYhsxkMj9JKTMAqq"
    "qqQgjDMAyZTqcvSCkzAJWVlSEhhKHrukyn0xellGmAsrKyEMAwDJlOpy9JKVMAZWVlIS+Apml6GiAajaqKImzLsm"
    "QqlbospUwCRKNRVQhhaJqWSqVSV6SUQwDRaFQVQhiapqWSyeQ1KeUgQDQaVYUQhqZpqWQyeV1KOQAQiURUIYShaV"
    "oqmUzekFLeAYhEIqoQwtA0LZVIJHqklP0AkUhEFUIYmqYlE4lEr5TyNkAkElGFEIamaclEInFLSnkLIBwOq0IIQ9"
    "O0ZCKRuC2l7AMIR6NRRQhhaJqWTCQSd6WUtwDC4bAqhDA0TUsmEol+KeVNgHA4rAohDE3TEolEv5TyBkA4HFaFEI"
    "amaYlEYkBKeR0gHA6rQghD07REIjEopewDCIVCqhDC0DQtkUgMSSn7AEKhkCqEMDRNSyQSw1LKGwChUEgVQhiapg"
    "0nEglNSnkdIBQKqUIIQ9O04UQioUkprwGEQiFVCGFomjacSCQ0KeVVgFAopAohDE3ThoeGhjQp5RWAYDAYEkIYmq"
    "YNDw0NaVLKywDBYDAkhDA0TRseGhrSpJSXAILBYEgIYWiapmUyGU1KeREgGAyGhBCGpmlaNptNSikvAJSUlISEEI"
    "amaVo2m01KKc8DlJSUhIQQhqZpWjabTUopzwGUlJSEhBCGpmlaNptNSinPApSUlISEEIamaVo2m01KKc8AlJSUhI"
    "QQhqZpWjabTUopTwOUlJSEhBCGpmlaNptNSilPAZSWloaEEIamaVo2m01KKU8ClJaWhoQQhqZpWjabTUopTwCUlp"
    "aGhBCGpmlaNptNSik7AUpLS0NCCEPTtGw2m5RSHgf4H0vwX439Dd3WAAAAAElFTkSuQmCC"
)
