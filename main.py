# main.py

from n_in_a_row.cli import main


if __name__ == "__main__":
    main()
