from branch_titlebar import main

if __name__ == "__main__":
    main()
